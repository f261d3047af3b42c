"""Tests for formatting amounts as text."""

from datetime import timedelta

import pytest

from timetext import CalendarPeriod, FixedDuration, format_amount, parse_amount
from timetext.util import DAY, HOUR, MINUTE, MONTH, YEAR


def test_format_period():
    """Test plural wording and omitted zero parts for periods."""
    assert format_amount(CalendarPeriod(days=2)) == "2 days"
    assert format_amount(CalendarPeriod(years=2, days=3)) == "2 years 3 days"
    assert format_amount(CalendarPeriod(months=5)) == "5 months"


def test_format_period_singular():
    """Test singular wording when a part is exactly one."""
    period = CalendarPeriod(years=1, months=1, days=1)

    assert format_amount(period) == "1 year 1 month 1 day"


def test_format_zero_is_now():
    """Test that zero amounts of either kind read "now"."""
    assert format_amount(CalendarPeriod()) == "now"
    assert format_amount(FixedDuration()) == "now"


def test_format_duration():
    """Test greedy breakdown of a fixed duration."""
    assert format_amount(FixedDuration.of(hours=1, minutes=30)) == "1 hour 30 minutes"
    assert format_amount(FixedDuration.of(days=2, seconds=5)) == "2 days 5 seconds"


def test_format_duration_all_parts():
    """Test every part of the breakdown in order."""
    seconds = YEAR + MONTH + DAY + HOUR + MINUTE + 1
    duration = FixedDuration(seconds=seconds, nanos=7_000_000)

    assert format_amount(duration) == (
        "1 year 1 month 1 day 1 hour 1 minute 1 second 7 ms"
    )


def test_format_duration_uses_fixed_month():
    """Test that 13 days of elapsed time read as a 12-day month plus a day."""
    assert format_amount(FixedDuration.of(days=13)) == "1 month 1 day"


def test_format_duration_millis_only():
    """Test that a sub-second duration is not reported as "now"."""
    assert format_amount(FixedDuration.of(millis=250)) == "250 ms"
    assert format_amount(FixedDuration.of(seconds=1, millis=500)) == "1 second 500 ms"


def test_format_rejects_other_types():
    """Test that non-amount values raise TypeError."""
    with pytest.raises(TypeError, match="CalendarPeriod or FixedDuration"):
        format_amount(timedelta(days=1))  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "text",
    ["2 days", "1 month", "3 years", "1 hour", "45 minutes", "10 seconds", "250 ms"],
)
def test_format_reads_back(text: str):
    """Test that single-unit text survives parse and format unchanged."""
    assert format_amount(parse_amount(text)) == text
