"""
Safety Signal Service - Advisory warnings for the active medication set
"""
import logging
from collections import Counter
from typing import List, Sequence

from medication_backend.config import settings
from medication_backend.models.regimen import (
    EvaluatedPrescription, SafetyReport, SafetyWarning, WarningSeverity, WarningType
)

logger = logging.getLogger(__name__)


DUPLICATE_MESSAGE = 'تم وصف نفس الدواء من قبل أكثر من طبيب'
POLYPHARMACY_MESSAGE = 'تتناول {count} أدوية حالياً. يُنصح بمراجعة الطبيب لمراجعة الأدوية'


class SafetySignalAnalyzer:
    """
    Scans the active set for duplicate prescriptions and polypharmacy.

    Only these two checks are performed. There is no drug-interaction
    database behind this analyzer, and no dosage-range or contraindication
    analysis; `interactions` in the report is always empty.
    """

    def __init__(self, polypharmacy_threshold: int = None):
        if polypharmacy_threshold is None:
            polypharmacy_threshold = settings.POLYPHARMACY_THRESHOLD
        self.polypharmacy_threshold = polypharmacy_threshold

    def analyze(self, active_meds: Sequence[EvaluatedPrescription]) -> SafetyReport:
        warnings = []

        duplicates = self._find_duplicates(active_meds)
        if duplicates:
            warnings.append(SafetyWarning(
                type=WarningType.DUPLICATE,
                severity=WarningSeverity.MEDIUM,
                message=DUPLICATE_MESSAGE,
                medications=duplicates
            ))

        count = len(active_meds)
        if count >= self.polypharmacy_threshold:
            warnings.append(SafetyWarning(
                type=WarningType.POLYPHARMACY,
                severity=WarningSeverity.LOW,
                message=POLYPHARMACY_MESSAGE.format(count=count),
                count=count
            ))

        if warnings:
            logger.info(f"Safety analysis raised {len(warnings)} warning(s) for {count} medications")

        return SafetyReport(interactions=[], warnings=warnings)

    def _find_duplicates(self, active_meds: Sequence[EvaluatedPrescription]) -> List[str]:
        """Names appearing more than once (case-insensitive), first-seen spelling"""
        counts = Counter(m.medication_name.lower() for m in active_meds)

        duplicates = []
        reported = set()
        for med in active_meds:
            key = med.medication_name.lower()
            if counts[key] > 1 and key not in reported:
                reported.add(key)
                duplicates.append(med.medication_name)

        return duplicates


safety_signal_analyzer = SafetySignalAnalyzer()
