"""
Duration Parser Service - Classify free-text prescription durations
"""
import re
import logging
from typing import List, Optional, Tuple

from medication_backend.models.regimen import ActivityWindow, WindowKind, CONTINUOUS, UNKNOWN

logger = logging.getLogger(__name__)


# Markers for medications with no fixed end date
CONTINUOUS_MARKERS = ['مستمر', 'continuous', 'ongoing']

# Checked in order; the first matching unit wins.
# Amounts must be whole and unsigned, so "1.5 months" or "-5 days" stay UNKNOWN.
DURATION_UNIT_MARKERS: List[Tuple[WindowKind, List[str]]] = [
    (WindowKind.DAYS, ['يوم', 'أيام', 'day']),
    (WindowKind.WEEKS, ['أسبوع', 'أسابيع', 'week']),
    (WindowKind.MONTHS, ['شهر', 'أشهر', 'شهور', 'month']),
]


class TextDurationParser:
    """
    Parses bilingual (Arabic/English) duration text into an ActivityWindow.

    Total over its input: unmatched or malformed text yields UNKNOWN.
    """

    def __init__(self):
        self.continuous_markers = [m.lower() for m in CONTINUOUS_MARKERS]
        self.unit_patterns = [
            (kind, re.compile(r'(?<![\d.٫\-])(\d+)\s*(?:' + '|'.join(map(re.escape, markers)) + r')', re.IGNORECASE))
            for kind, markers in DURATION_UNIT_MARKERS
        ]

    def parse(self, duration_text: Optional[str]) -> ActivityWindow:
        """
        Classify a duration string.

        Args:
            duration_text: Free-text duration such as "7 days", "30 يوم" or "مستمر"

        Returns:
            ActivityWindow of kind CONTINUOUS, DAYS, WEEKS, MONTHS or UNKNOWN
        """
        if not duration_text or not duration_text.strip():
            return UNKNOWN

        text = duration_text.lower()

        if any(marker in text for marker in self.continuous_markers):
            return CONTINUOUS

        for kind, pattern in self.unit_patterns:
            match = pattern.search(text)
            if match:
                try:
                    return ActivityWindow(kind, int(match.group(1)))
                except ValueError:
                    logger.debug(f"Unreadable duration amount in {duration_text!r}")
                    return UNKNOWN

        return UNKNOWN


duration_parser = TextDurationParser()


def parse_duration(duration_text: Optional[str]) -> ActivityWindow:
    """Module-level shortcut for the shared parser"""
    return duration_parser.parse(duration_text)
