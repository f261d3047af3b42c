from .amount import Amount, CalendarPeriod, FixedDuration
from .format import format_amount
from .interval import TimeInterval
from .parser import (
    FormatError,
    UnitToken,
    parse_amount,
    parse_duration,
    resolve_instant,
    resolve_interval,
    tokenize,
)
from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR

__all__ = [
    "Amount",
    "CalendarPeriod",
    "FixedDuration",
    "TimeInterval",
    "FormatError",
    "UnitToken",
    "tokenize",
    "parse_amount",
    "parse_duration",
    "resolve_instant",
    "resolve_interval",
    "format_amount",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
]
