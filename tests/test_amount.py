"""Tests for amount and interval value types."""

from datetime import datetime, timedelta, timezone

import pytest
from dateutil.relativedelta import relativedelta

from timetext import CalendarPeriod, FixedDuration, TimeInterval


def test_period_to_relativedelta():
    """Test conversion of a period to a relativedelta."""
    period = CalendarPeriod(years=1, months=2, days=3)

    assert period.to_relativedelta() == relativedelta(years=1, months=2, days=3)
    assert not period.is_zero
    assert CalendarPeriod().is_zero


def test_duration_of_units():
    """Test building a duration from whole units."""
    duration = FixedDuration.of(days=1, hours=2, minutes=3, seconds=4, millis=5)

    assert duration.seconds == 86400 + 7200 + 180 + 4
    assert duration.nanos == 5_000_000
    assert duration.millis == 5


def test_duration_rejects_bad_nanos():
    """Test that nanos outside one second raise ValueError."""
    with pytest.raises(ValueError, match="nanos must be in"):
        FixedDuration(seconds=1, nanos=1_000_000_000)

    with pytest.raises(ValueError, match="nanos must be in"):
        FixedDuration(nanos=-1)


def test_duration_timedelta_conversion():
    """Test conversion to and from timedelta."""
    delta = timedelta(days=1, milliseconds=5)
    duration = FixedDuration.from_timedelta(delta)

    assert duration == FixedDuration(seconds=86400, nanos=5_000_000)
    assert duration.to_timedelta() == delta
    assert duration.total_seconds() == pytest.approx(86400.005)


def test_duration_is_zero():
    """Test zero detection including the sub-second part."""
    assert FixedDuration().is_zero
    assert not FixedDuration(nanos=1).is_zero


def test_duration_total_nanos():
    """Test that total_nanos combines whole seconds and the remainder."""
    duration = FixedDuration(seconds=2, nanos=500_000_000)

    assert duration.total_nanos == 2_500_000_000
    assert FixedDuration.from_nanos(duration.total_nanos) == duration
    assert duration.total_seconds() == 2.5


def test_amounts_are_immutable():
    """Test that amounts cannot be changed after construction."""
    period = CalendarPeriod(days=1)

    with pytest.raises(AttributeError):
        period.days = 2  # type: ignore[misc]


def test_interval_duration_and_str():
    """Test interval duration and string rendering."""
    start = datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    end = datetime(2025, 1, 1, 1, 0, 0, tzinfo=timezone.utc)
    interval = TimeInterval(start=start, end=end)

    assert interval.duration == timedelta(hours=1)
    assert str(interval) == (
        "TimeInterval(2025-01-01T00:00:00+00:00→2025-01-01T01:00:00+00:00, 3600.0s)"
    )


def test_interval_rejects_naive_datetimes():
    """Test that naive datetimes raise TypeError."""
    aware = datetime(2025, 1, 1, tzinfo=timezone.utc)

    with pytest.raises(TypeError, match="timezone-aware"):
        TimeInterval(start=datetime(2025, 1, 1), end=aware)
