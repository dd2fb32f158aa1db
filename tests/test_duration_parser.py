"""
Tests for TextDurationParser.

Validates:
- Continuous-care markers in both languages
- Day / week / month windows with their amounts
- Match priority when several units appear
- Fallback to UNKNOWN for absent or unreadable text
"""
import pytest

from medication_backend.models import ActivityWindow, WindowKind, CONTINUOUS, UNKNOWN
from medication_backend.services.duration_parser import TextDurationParser, parse_duration


@pytest.fixture
def parser():
    return TextDurationParser()


# ---------------------------------------------------------------------------
# Continuous care
# ---------------------------------------------------------------------------

class TestContinuous:

    @pytest.mark.parametrize("text", ["مستمر", "Continuous", "ONGOING therapy", "علاج مستمر"])
    def test_markers(self, parser, text):
        assert parser.parse(text) == CONTINUOUS

    def test_continuous_beats_numeric_unit(self, parser):
        assert parser.parse("30 days then continuous") == CONTINUOUS


# ---------------------------------------------------------------------------
# Bounded windows
# ---------------------------------------------------------------------------

class TestBoundedWindows:

    @pytest.mark.parametrize("text,expected", [
        ("30 يوم", ActivityWindow(WindowKind.DAYS, 30)),
        ("7 days", ActivityWindow(WindowKind.DAYS, 7)),
        ("10Day", ActivityWindow(WindowKind.DAYS, 10)),
        ("5 أيام", ActivityWindow(WindowKind.DAYS, 5)),
        ("2 weeks", ActivityWindow(WindowKind.WEEKS, 2)),
        ("3 أسبوع", ActivityWindow(WindowKind.WEEKS, 3)),
        ("6 months", ActivityWindow(WindowKind.MONTHS, 6)),
        ("1 شهر", ActivityWindow(WindowKind.MONTHS, 1)),
        ("2 أسابيع", ActivityWindow(WindowKind.WEEKS, 2)),
        ("3 أشهر", ActivityWindow(WindowKind.MONTHS, 3)),
        ("4 شهور", ActivityWindow(WindowKind.MONTHS, 4)),
    ])
    def test_units(self, parser, text, expected):
        assert parser.parse(text) == expected

    def test_days_take_priority_over_weeks(self, parser):
        window = parser.parse("2 weeks (14 days)")
        assert window == ActivityWindow(WindowKind.DAYS, 14)

    def test_arabic_indic_digits(self, parser):
        assert parser.parse("٣٠ يوم") == ActivityWindow(WindowKind.DAYS, 30)

    def test_bounded_flag(self, parser):
        assert parser.parse("7 days").is_bounded
        assert not parser.parse("ongoing").is_bounded


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class TestUnknown:

    @pytest.mark.parametrize("text", [None, "", "   ", "until finished", "days", "حسب الحاجة", "a few weeks"])
    def test_unreadable_text(self, parser, text):
        assert parser.parse(text) == UNKNOWN

    @pytest.mark.parametrize("text", ["\x00\x01", "-5", "∞ days", "7" * 50 + " day", "🙂 month"])
    def test_total_over_odd_input(self, parser, text):
        window = parser.parse(text)
        assert window.kind in set(WindowKind)

    def test_module_shortcut(self):
        assert parse_duration("14 day") == ActivityWindow(WindowKind.DAYS, 14)

    @pytest.mark.parametrize("text", ["1.5 months", "-5 days", "2.5 weeks", "١٫٥ شهر"])
    def test_fractional_or_signed_amounts(self, parser, text):
        assert parser.parse(text) == UNKNOWN
