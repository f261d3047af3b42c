"""Utility constants and helpers for timetext.

Time unit constants represent durations in seconds. MONTH and YEAR are the
fixed approximations used when calendar units have to be folded into an
exact duration; calendar-accurate arithmetic goes through CalendarPeriod.
"""

from typing import Literal, TypeAlias

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 1036800  # 12 days
YEAR = 31536000  # 365 days

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000

Unit: TypeAlias = Literal[
    "millis", "seconds", "minutes", "hours", "days", "weeks", "months", "years"
]

# Units whose presence turns a parsed amount into a FixedDuration
FIXED_UNITS: frozenset[Unit] = frozenset({"millis", "seconds", "minutes", "hours"})

# Whole-second scale of each unit when folded into a FixedDuration
SCALES: dict[Unit, int] = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
    "months": MONTH,
    "years": YEAR,
}
