"""
Medication Service
Composes the aggregator, schedule builder and safety analyzer into endpoint payloads
"""
import logging
from datetime import datetime
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from medication_backend.models.regimen import HistoryFilters
from medication_backend.services.errors import PatientNotFoundError
from medication_backend.services.medication_aggregator import MedicationAggregator
from medication_backend.services.safety_signals import SafetySignalAnalyzer, safety_signal_analyzer
from medication_backend.services.weekly_schedule import WeeklyScheduleBuilder, weekly_schedule_builder

logger = logging.getLogger(__name__)


PATIENT_NOT_FOUND_MESSAGE = 'المريض غير موجود'
CURRENT_MEDICATIONS_ERROR = 'حدث خطأ أثناء جلب الأدوية الحالية'
SCHEDULE_ERROR = 'حدث خطأ أثناء إنشاء جدول الأدوية'
HISTORY_ERROR = 'حدث خطأ أثناء جلب تاريخ الأدوية'
INTERACTIONS_ERROR = 'حدث خطأ أثناء فحص تفاعلات الأدوية'


def _failure(message: str, code: str = None) -> Dict[str, Any]:
    result = {'success': False, 'message': message}
    if code:
        result['code'] = code
    return result


class MedicationService:
    """
    Endpoint-facing medication operations

    Every method returns a result dict with a `success` flag. Upstream
    faults (unknown patient, store errors) become `success: False` with a
    localized message; empty data is a successful, empty result.
    """

    def __init__(self, db: Session,
                 aggregator: MedicationAggregator = None,
                 schedule_builder: WeeklyScheduleBuilder = None,
                 safety_analyzer: SafetySignalAnalyzer = None):
        self.aggregator = aggregator or MedicationAggregator(db)
        self.schedule_builder = schedule_builder or weekly_schedule_builder
        self.safety_analyzer = safety_analyzer or safety_signal_analyzer

    def get_current_medications(self, patient_uid: str, now: datetime = None) -> Dict[str, Any]:
        try:
            active = self.aggregator.get_current_medications(patient_uid, now)
        except PatientNotFoundError as e:
            logger.warning(e.message)
            return _failure(PATIENT_NOT_FOUND_MESSAGE, e.code)
        except SQLAlchemyError as e:
            logger.error(f"Error in get_current_medications: {e}")
            return _failure(CURRENT_MEDICATIONS_ERROR)

        return {
            'success': True,
            'medications': [m.to_dict() for m in active],
            'count': len(active)
        }

    def get_medication_schedule(self, patient_uid: str, now: datetime = None) -> Dict[str, Any]:
        try:
            active = self.aggregator.get_current_medications(patient_uid, now)
        except PatientNotFoundError as e:
            logger.warning(e.message)
            return _failure(PATIENT_NOT_FOUND_MESSAGE, e.code)
        except SQLAlchemyError as e:
            logger.error(f"Error in get_medication_schedule: {e}")
            return _failure(SCHEDULE_ERROR)

        schedule = self.schedule_builder.build(active)

        return {
            'success': True,
            'schedule': {
                'weeklySchedule': schedule.to_list(),
                'medications': self.schedule_builder.summarize(active)
            }
        }

    def get_medication_history(self, patient_uid: str, filters: HistoryFilters = None,
                               now: datetime = None) -> Dict[str, Any]:
        try:
            page = self.aggregator.get_history(patient_uid, filters, now)
        except PatientNotFoundError as e:
            logger.warning(e.message)
            return _failure(PATIENT_NOT_FOUND_MESSAGE, e.code)
        except SQLAlchemyError as e:
            logger.error(f"Error in get_medication_history: {e}")
            return _failure(HISTORY_ERROR)

        return {
            'success': True,
            'history': [m.to_dict() for m in page.items],
            'statistics': page.statistics(),
            'pagination': page.pagination()
        }

    def check_medication_interactions(self, patient_uid: str, now: datetime = None) -> Dict[str, Any]:
        try:
            active = self.aggregator.get_current_medications(patient_uid, now)
        except PatientNotFoundError as e:
            logger.warning(e.message)
            return _failure(PATIENT_NOT_FOUND_MESSAGE, e.code)
        except SQLAlchemyError as e:
            logger.error(f"Error in check_medication_interactions: {e}")
            return _failure(INTERACTIONS_ERROR)

        report = self.safety_analyzer.analyze(active)

        result = {'success': True}
        result.update(report.to_dict())
        result['medicationCount'] = len(active)
        return result
