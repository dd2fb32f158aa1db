"""
Frequency Resolver Service - Map free-text dosing frequency to times of day
"""
import re
import logging
from typing import Callable, List, Optional, Tuple

from medication_backend.config import settings

logger = logging.getLogger(__name__)


ONCE_DAILY = ['8:00 AM']
TWICE_DAILY = ['8:00 AM', '8:00 PM']
THREE_TIMES_DAILY = ['8:00 AM', '2:00 PM', '8:00 PM']
FOUR_TIMES_DAILY = ['8:00 AM', '12:00 PM', '4:00 PM', '8:00 PM']

_TIME_PATTERN = re.compile(r'(\d+):(\d+)\s*(AM|PM)', re.IGNORECASE)


def format_hour(hour: int) -> str:
    """Render an hour of the day (0-23) as "H:00 AM/PM" """
    display = hour % 12 or 12
    period = 'AM' if hour < 12 else 'PM'
    return f"{display}:00 {period}"


def time_to_minutes(time_str: str) -> int:
    """Minutes since midnight for a "H:MM AM/PM" string, 0 if unreadable"""
    match = _TIME_PATTERN.search(time_str or '')
    if not match:
        return 0

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).upper()

    if period == 'PM' and hours != 12:
        hours += 12
    if period == 'AM' and hours == 12:
        hours = 0

    return hours * 60 + minutes


def _contains_all(*keywords: str) -> Callable[[str], bool]:
    return lambda text: all(k in text for k in keywords)


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(k in text for k in keywords)


class FrequencyResolver:
    """
    Resolves bilingual frequency text into an ordered list of dosing times.

    The result is never empty: text that matches nothing gets the default
    slot so the medication still shows up on the schedule.
    """

    def __init__(self, default_time: str = None):
        self.default_times = [default_time or settings.DEFAULT_DOSE_TIME]

        # (matcher, slots), checked in order
        self.slot_table: List[Tuple[Callable[[str], bool], List[str]]] = [
            (lambda t: _contains_all('مرة', 'يوم')(t) or _contains_all('once', 'day')(t), ONCE_DAILY),
            (_contains_any('مرتين', 'twice'), TWICE_DAILY),
            (_contains_any('ثلاث', 'three'), THREE_TIMES_DAILY),
            (_contains_any('أربع', 'four'), FOUR_TIMES_DAILY),
        ]

        self.interval_patterns = [
            re.compile(r'(\d+)\s*(?:ساعة|ساعات|hour)'),
            re.compile(r'\bq(\d+)h\b'),  # q6h, q8h
        ]

    def resolve(self, frequency_text: Optional[str]) -> List[str]:
        """
        Resolve frequency text to times of day.

        Args:
            frequency_text: e.g. "twice daily", "مرتين يومياً", "every 8 hours"

        Returns:
            Non-empty list of "H:MM AM/PM" strings in chronological order
        """
        if not frequency_text:
            return list(self.default_times)

        text = frequency_text.lower()

        for matches, slots in self.slot_table:
            if matches(text):
                return list(slots)

        interval = self._interval_hours(text)
        if interval:
            return [format_hour(hour) for hour in range(0, 24, interval)]

        logger.debug(f"No frequency pattern matched {frequency_text!r}, using default slot")
        return list(self.default_times)

    def _interval_hours(self, text: str) -> Optional[int]:
        """Extract N from "every N hours" style text; None when absent or not positive"""
        for pattern in self.interval_patterns:
            match = pattern.search(text)
            if match:
                try:
                    hours = int(match.group(1))
                except ValueError:
                    return None
                return hours if hours > 0 else None
        return None


frequency_resolver = FrequencyResolver()
