# Regimen Models
from .regimen import (
    WindowKind, ActivityWindow, CONTINUOUS, UNKNOWN,
    PrescriptionRecord, EvaluatedPrescription,
    DosingSlot, DaySchedule, WeeklySchedule,
    WarningType, WarningSeverity, SafetyWarning, SafetyReport,
    HistoryFilters, HistoryPage
)
