"""
Tests for FrequencyResolver and the time-of-day helpers.
"""
import pytest

from medication_backend.services.frequency_resolver import (
    FrequencyResolver, format_hour, time_to_minutes
)


@pytest.fixture
def resolver():
    return FrequencyResolver()


class TestSlotTable:

    @pytest.mark.parametrize("text", ["once a day", "Once per day", "مرة واحدة يومياً في اليوم", "مرة في اليوم"])
    def test_once_daily(self, resolver, text):
        assert resolver.resolve(text) == ["8:00 AM"]

    @pytest.mark.parametrize("text", ["twice daily", "TWICE a day", "مرتين يومياً"])
    def test_twice_daily(self, resolver, text):
        assert resolver.resolve(text) == ["8:00 AM", "8:00 PM"]

    @pytest.mark.parametrize("text", ["three times daily", "ثلاث مرات يومياً"])
    def test_three_times_daily(self, resolver, text):
        assert resolver.resolve(text) == ["8:00 AM", "2:00 PM", "8:00 PM"]

    @pytest.mark.parametrize("text", ["four times a day", "أربع مرات"])
    def test_four_times_daily(self, resolver, text):
        assert resolver.resolve(text) == ["8:00 AM", "12:00 PM", "4:00 PM", "8:00 PM"]


class TestIntervals:

    def test_every_eight_hours(self, resolver):
        assert resolver.resolve("every 8 hours") == ["12:00 AM", "8:00 AM", "4:00 PM"]

    def test_every_six_hours_arabic(self, resolver):
        assert resolver.resolve("كل 6 ساعات") == ["12:00 AM", "6:00 AM", "12:00 PM", "6:00 PM"]

    def test_singular_arabic_hour(self, resolver):
        assert resolver.resolve("كل 12 ساعة") == ["12:00 AM", "12:00 PM"]

    def test_q_shorthand(self, resolver):
        assert resolver.resolve("q8h") == ["12:00 AM", "8:00 AM", "4:00 PM"]

    def test_interval_longer_than_a_day(self, resolver):
        assert resolver.resolve("every 36 hours") == ["12:00 AM"]

    def test_zero_interval_falls_back(self, resolver):
        assert resolver.resolve("every 0 hours") == ["8:00 AM"]


class TestDefault:

    @pytest.mark.parametrize("text", [None, "", "as needed", "عند اللزوم", "!!!", "daily"])
    def test_never_empty(self, resolver, text):
        assert resolver.resolve(text) == ["8:00 AM"]

    def test_configurable_default(self):
        assert FrequencyResolver(default_time="9:00 AM").resolve("prn") == ["9:00 AM"]

    def test_result_is_a_copy(self, resolver):
        resolver.resolve("twice daily").append("11:00 PM")
        assert resolver.resolve("twice daily") == ["8:00 AM", "8:00 PM"]


class TestTimeHelpers:

    @pytest.mark.parametrize("hour,expected", [
        (0, "12:00 AM"), (1, "1:00 AM"), (11, "11:00 AM"),
        (12, "12:00 PM"), (13, "1:00 PM"), (23, "11:00 PM"),
    ])
    def test_format_hour(self, hour, expected):
        assert format_hour(hour) == expected

    @pytest.mark.parametrize("text,minutes", [
        ("12:00 AM", 0), ("12:00 PM", 720), ("1:00 PM", 780),
        ("8:30 am", 510), ("11:59 PM", 1439), ("garbage", 0),
    ])
    def test_time_to_minutes(self, text, minutes):
        assert time_to_minutes(text) == minutes
