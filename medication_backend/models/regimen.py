"""
Regimen Models - Request-scoped values produced by the medication engine
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class WindowKind(Enum):
    CONTINUOUS = "continuous"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ActivityWindow:
    """Inferred activity window of a prescription"""
    kind: WindowKind
    amount: Optional[int] = None

    @property
    def is_bounded(self) -> bool:
        return self.kind in (WindowKind.DAYS, WindowKind.WEEKS, WindowKind.MONTHS)


CONTINUOUS = ActivityWindow(WindowKind.CONTINUOUS)
UNKNOWN = ActivityWindow(WindowKind.UNKNOWN)


@dataclass(frozen=True)
class PrescriptionRecord:
    """A single medication prescribed during a completed visit"""
    medication_name: str
    dosage: str
    frequency: str
    prescribed_date: datetime
    visit_ref: Any
    duration: Optional[str] = None
    instructions: Optional[str] = None
    prescribing_doctor_ref: Any = None
    prescribing_doctor_name: str = ""
    prescribing_doctor_specialty: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'medicationName': self.medication_name,
            'dosage': self.dosage,
            'frequency': self.frequency,
            'duration': self.duration,
            'instructions': self.instructions,
            'visitId': self.visit_ref,
            'visitDate': self.prescribed_date.isoformat(),
            'doctorId': self.prescribing_doctor_ref,
            'doctorName': self.prescribing_doctor_name,
            'doctorSpecialization': self.prescribing_doctor_specialty
        }


@dataclass(frozen=True)
class EvaluatedPrescription:
    """Prescription record flagged with its activity at query time"""
    record: PrescriptionRecord
    is_active: bool

    @property
    def medication_name(self) -> str:
        return self.record.medication_name

    def to_dict(self) -> Dict[str, Any]:
        data = self.record.to_dict()
        data['isActive'] = self.is_active
        return data


@dataclass(frozen=True)
class DosingSlot:
    """One scheduled time of day for a medication"""
    time_of_day: str
    medication_name: str
    dosage: str
    instructions: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'medicationName': self.medication_name,
            'dosage': self.dosage,
            'time': self.time_of_day,
            'instructions': self.instructions
        }


@dataclass
class DaySchedule:
    """Dosing slots for one weekday"""
    day: str
    day_index: int
    medications: List[DosingSlot] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'dayIndex': self.day_index,
            'medications': [m.to_dict() for m in self.medications]
        }


@dataclass
class WeeklySchedule:
    """Seven day dosing calendar"""
    days: List[DaySchedule]

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self.days]


class WarningType(Enum):
    DUPLICATE = "DUPLICATE"
    POLYPHARMACY = "POLYPHARMACY"


class WarningSeverity(Enum):
    LOW = "low"
    MEDIUM = "medium"


@dataclass
class SafetyWarning:
    """Advisory safety signal"""
    type: WarningType
    severity: WarningSeverity
    message: str
    medications: Optional[List[str]] = None
    count: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'type': self.type.value,
            'severity': self.severity.value,
            'message': self.message
        }
        if self.medications is not None:
            data['medications'] = self.medications
        if self.count is not None:
            data['count'] = self.count
        return data


@dataclass
class SafetyReport:
    """Safety analysis of an active medication set"""
    # Reserved for drug-interaction database integration; always empty here
    interactions: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[SafetyWarning] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'interactions': list(self.interactions),
            'warnings': [w.to_dict() for w in self.warnings]
        }


@dataclass
class HistoryFilters:
    """Filters accepted by the medication history view"""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    medication_name: Optional[str] = None
    page: int = 1
    limit: int = 50


@dataclass
class HistoryPage:
    """One page of flagged medication history"""
    items: List[EvaluatedPrescription]
    total_visits: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        if self.limit <= 0:
            return 0
        return -(-self.total_visits // self.limit)

    def statistics(self) -> Dict[str, int]:
        unique_names = {item.medication_name for item in self.items}
        return {
            'totalPrescriptions': len(self.items),
            'uniqueMedications': len(unique_names),
            'activeMedications': sum(1 for item in self.items if item.is_active)
        }

    def pagination(self) -> Dict[str, int]:
        return {
            'total': self.total_visits,
            'page': self.page,
            'limit': self.limit,
            'pages': self.pages
        }
