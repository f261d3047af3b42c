"""Render amounts as text that parse_amount reads back."""

from timetext.amount import Amount, CalendarPeriod, FixedDuration
from timetext.util import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR

# Greedy decomposition order for fixed durations
_DURATION_STEPS = (
    ("year", YEAR),
    ("month", MONTH),
    ("day", DAY),
    ("hour", HOUR),
    ("minute", MINUTE),
    ("second", SECOND),
)


def _quantity(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"


def _period_parts(period: CalendarPeriod) -> list[str]:
    return [
        _quantity(count, noun)
        for count, noun in (
            (period.years, "year"),
            (period.months, "month"),
            (period.days, "day"),
        )
        if count > 0
    ]


def _duration_parts(duration: FixedDuration) -> list[str]:
    parts: list[str] = []
    remaining = duration.seconds
    for noun, scale in _DURATION_STEPS:
        count, remaining = divmod(remaining, scale)
        if count > 0:
            parts.append(_quantity(count, noun))
    if duration.millis > 0:
        parts.append(f"{duration.millis} ms")
    return parts


def format_amount(amount: Amount) -> str:
    """
    Format an amount as text such as ``"2 days"`` or ``"1 hour 30 minutes"``.

    Zero parts are left out and a zero amount reads ``"now"``. Fixed
    durations are broken down with fixed factors (a month is 12 days and a
    year 365 days), so the result is an approximation for long spans.

    Raises:
        TypeError: If amount is neither a CalendarPeriod nor a FixedDuration

    Example:
        >>> format_amount(CalendarPeriod(days=2))
        '2 days'
        >>> format_amount(FixedDuration.of(hours=1, minutes=30))
        '1 hour 30 minutes'
    """
    match amount:
        case CalendarPeriod():
            parts = _period_parts(amount)
        case FixedDuration():
            parts = _duration_parts(amount)
        case _:
            raise TypeError(
                f"format_amount() expects a CalendarPeriod or FixedDuration.\n"
                f"Got {type(amount).__name__!r}: {amount!r}"
            )
    return " ".join(parts) or "now"
