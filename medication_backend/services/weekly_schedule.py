"""
Weekly Schedule Service - Build a 7-day dosing calendar from active medications
"""
import logging
from dataclasses import replace
from typing import Any, Dict, List, Sequence

from medication_backend.models.regimen import (
    DaySchedule, DosingSlot, EvaluatedPrescription, WeeklySchedule
)
from medication_backend.services.frequency_resolver import (
    FrequencyResolver, frequency_resolver, time_to_minutes
)

logger = logging.getLogger(__name__)


# Regional week starts on Saturday
WEEKDAY_LABELS = ['السبت', 'الأحد', 'الإثنين', 'الثلاثاء', 'الأربعاء', 'الخميس', 'الجمعة']


class WeeklyScheduleBuilder:
    """
    Builds the weekly dosing calendar

    Every regimen is treated as daily: each active medication appears on all
    seven days at the times its frequency resolves to. Weekday-specific
    regimens ("only on Mondays") are not supported.
    """

    def __init__(self, resolver: FrequencyResolver = None):
        self.resolver = resolver or frequency_resolver

    def build(self, active_meds: Sequence[EvaluatedPrescription]) -> WeeklySchedule:
        """
        Build the schedule

        Args:
            active_meds: Active prescriptions, in the order they should be listed on ties

        Returns:
            WeeklySchedule with exactly seven days
        """
        slots: List[DosingSlot] = []
        for med in active_meds:
            record = med.record
            for time_of_day in self.resolver.resolve(record.frequency):
                slots.append(DosingSlot(
                    time_of_day=time_of_day,
                    medication_name=record.medication_name,
                    dosage=record.dosage,
                    instructions=record.instructions
                ))

        # sorted() is stable, so equal times keep insertion order
        ordered = sorted(slots, key=lambda s: time_to_minutes(s.time_of_day))

        days = [
            DaySchedule(day=label, day_index=index, medications=[replace(s) for s in ordered])
            for index, label in enumerate(WEEKDAY_LABELS)
        ]

        logger.debug(f"Built weekly schedule: {len(active_meds)} medications, {len(ordered)} slots per day")
        return WeeklySchedule(days=days)

    def summarize(self, active_meds: Sequence[EvaluatedPrescription]) -> List[Dict[str, Any]]:
        """De-duplicated medication summary shown next to the schedule"""
        seen = set()
        summary = []

        for med in active_meds:
            record = med.record
            key = (record.medication_name.lower(), record.dosage, record.frequency)
            if key in seen:
                continue
            seen.add(key)

            summary.append({
                'medicationName': record.medication_name,
                'dosage': record.dosage,
                'frequency': record.frequency,
                'duration': record.duration,
                'instructions': record.instructions,
                'doctorName': record.prescribing_doctor_name,
                'prescribedDate': record.prescribed_date.isoformat()
            })

        return summary


weekly_schedule_builder = WeeklyScheduleBuilder()
