"""Amounts of time: calendar periods and fixed durations.

An amount is one of two shapes, never a mix:

- ``CalendarPeriod`` counts years, months and days. Its length depends on
  the date it is applied to ("1 month" back from March 31 lands on
  February 28 or 29).
- ``FixedDuration`` is an exact amount of elapsed time.

``Amount`` is the union of the two. Callers tell them apart with
``isinstance`` or ``match``.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import TypeAlias

from typing_extensions import override

from dateutil.relativedelta import relativedelta

from timetext.util import DAY, HOUR, MINUTE, NANOS_PER_MILLI, NANOS_PER_SECOND


@dataclass(frozen=True, kw_only=True)
class CalendarPeriod:
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0

    def to_relativedelta(self) -> relativedelta:
        """Return the period as a dateutil relativedelta for calendar math."""
        return relativedelta(years=self.years, months=self.months, days=self.days)

    @override
    def __str__(self) -> str:
        return f"CalendarPeriod({self.years}y {self.months}mo {self.days}d)"


@dataclass(frozen=True, kw_only=True)
class FixedDuration:
    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.nanos < NANOS_PER_SECOND):
            raise ValueError(
                f"FixedDuration nanos must be in [0, {NANOS_PER_SECOND}), "
                f"got {self.nanos}"
            )

    @classmethod
    def of(
        cls,
        *,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        millis: int = 0,
    ) -> "FixedDuration":
        """Build a duration from whole units. A day is exactly 24 hours.

        Example:
            >>> FixedDuration.of(hours=5, minutes=3, seconds=34)
            FixedDuration(seconds=18214, nanos=0)
        """
        total_nanos = (
            days * DAY + hours * HOUR + minutes * MINUTE + seconds
        ) * NANOS_PER_SECOND + millis * NANOS_PER_MILLI
        return cls.from_nanos(total_nanos)

    @classmethod
    def from_nanos(cls, total: int) -> "FixedDuration":
        secs, nanos = divmod(total, NANOS_PER_SECOND)
        return cls(seconds=secs, nanos=nanos)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "FixedDuration":
        micros = (delta.days * DAY + delta.seconds) * 1_000_000 + delta.microseconds
        return cls.from_nanos(micros * 1000)

    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    @property
    def millis(self) -> int:
        """Millisecond part of the sub-second remainder."""
        return self.nanos // NANOS_PER_MILLI

    @property
    def is_zero(self) -> bool:
        return self.total_nanos == 0

    def total_seconds(self) -> float:
        return self.total_nanos / NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Return the duration as a timedelta (truncated to microseconds)."""
        return timedelta(seconds=self.seconds, microseconds=self.nanos // 1000)

    @override
    def __str__(self) -> str:
        return f"FixedDuration({self.total_seconds()}s)"


Amount: TypeAlias = CalendarPeriod | FixedDuration
