"""
Activity Evaluator Service - Decide whether a prescription is still active
"""
import logging
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from dateutil.relativedelta import relativedelta

from medication_backend.config import settings
from medication_backend.models.regimen import (
    ActivityWindow, EvaluatedPrescription, PrescriptionRecord, WindowKind
)
from medication_backend.services.duration_parser import TextDurationParser, duration_parser

logger = logging.getLogger(__name__)


class ActivityView(Enum):
    """Which view an activity flag is computed for"""
    CURRENT = "current"
    HISTORY = "history"


class ActivityEvaluator:
    """
    Activity inference for prescription records

    Bounded windows end at prescribed_date + duration (inclusive). Records
    whose duration cannot be read fall back to a recency threshold that
    differs between the current-medications view and the history view.
    """

    def __init__(self, parser: TextDurationParser = None,
                 current_fallback_days: int = None,
                 history_fallback_days: int = None):
        self.parser = parser or duration_parser
        self.fallback_days = {
            ActivityView.CURRENT: current_fallback_days
            if current_fallback_days is not None else settings.CURRENT_UNKNOWN_DURATION_DAYS,
            ActivityView.HISTORY: history_fallback_days
            if history_fallback_days is not None else settings.HISTORY_UNKNOWN_DURATION_DAYS,
        }

    def window_end(self, record: PrescriptionRecord) -> Optional[datetime]:
        """End of the record's bounded window, None for continuous or unknown"""
        return self._window_end(self.parser.parse(record.duration), record.prescribed_date)

    @staticmethod
    def _window_end(window: ActivityWindow, start: datetime) -> Optional[datetime]:
        try:
            if window.kind == WindowKind.DAYS:
                return start + timedelta(days=window.amount)
            if window.kind == WindowKind.WEEKS:
                return start + timedelta(days=7 * window.amount)
            if window.kind == WindowKind.MONTHS:
                return start + relativedelta(months=window.amount)
        except (OverflowError, ValueError):
            # Window ends past the largest representable date
            return datetime.max
        return None

    def is_active(self, record: PrescriptionRecord, now: datetime = None,
                  view: ActivityView = ActivityView.CURRENT) -> bool:
        """
        Check whether a prescription is active at `now`

        Args:
            record: Prescription with its visit date and duration text
            now: Reference time (defaults to the current UTC time)
            view: CURRENT or HISTORY, selecting the unknown-duration fallback

        Returns:
            True if the activity window includes `now`
        """
        now = now or datetime.utcnow()
        window = self.parser.parse(record.duration)

        if window.kind == WindowKind.CONTINUOUS:
            return True

        end = self._window_end(window, record.prescribed_date)
        if end is not None:
            return now <= end

        elapsed_days = (now - record.prescribed_date).total_seconds() / 86400
        return elapsed_days <= self.fallback_days[view]

    def evaluate(self, record: PrescriptionRecord, now: datetime = None,
                 view: ActivityView = ActivityView.CURRENT) -> EvaluatedPrescription:
        return EvaluatedPrescription(record=record, is_active=self.is_active(record, now, view))


activity_evaluator = ActivityEvaluator()
