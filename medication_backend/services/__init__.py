# Services Package
from .duration_parser import TextDurationParser, duration_parser, parse_duration
from .frequency_resolver import FrequencyResolver, frequency_resolver, format_hour, time_to_minutes
from .activity_evaluator import ActivityEvaluator, ActivityView, activity_evaluator
from .medication_aggregator import MedicationAggregator
from .weekly_schedule import WeeklyScheduleBuilder, weekly_schedule_builder, WEEKDAY_LABELS
from .safety_signals import SafetySignalAnalyzer, safety_signal_analyzer
from .medication_service import MedicationService
from .errors import MedicationServiceError, PatientNotFoundError

__all__ = [
    'TextDurationParser',
    'duration_parser',
    'parse_duration',
    'FrequencyResolver',
    'frequency_resolver',
    'format_hour',
    'time_to_minutes',
    'ActivityEvaluator',
    'ActivityView',
    'activity_evaluator',
    'MedicationAggregator',
    'WeeklyScheduleBuilder',
    'weekly_schedule_builder',
    'WEEKDAY_LABELS',
    'SafetySignalAnalyzer',
    'safety_signal_analyzer',
    'MedicationService',
    'MedicationServiceError',
    'PatientNotFoundError',
]
