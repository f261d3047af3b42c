"""Parse human-typed time text into instants, intervals and amounts.

Three shapes of input are understood:

- ``"now"`` (any case)
- a relative amount such as ``"2 hours"``, ``"5h 3min 34s"`` or ``"1 month"``,
  meaning that long before now
- an ISO-8601 date-time such as ``"2025-01-15T09:30:00"``, read on the wall
  clock of the resolution zone unless it carries its own offset

Relative amounts are scanned leniently: every ``<digits><unit>`` pair found
in the text counts, anything between them is ignored, and a repeated unit
keeps its last quantity.
"""

import logging
import re
from collections.abc import Iterator
from datetime import datetime, timezone, tzinfo
from typing import NamedTuple
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse
from dateutil.tz import tzlocal
from typing_extensions import deprecated

from timetext.amount import Amount, CalendarPeriod, FixedDuration
from timetext.interval import TimeInterval
from timetext.util import FIXED_UNITS, NANOS_PER_MILLI, NANOS_PER_SECOND, SCALES, Unit

logger = logging.getLogger(__name__)

# Spellings understood by parse_amount and the relative branch of resolve_*
_SPELLINGS: dict[str, Unit] = {
    "millis": "millis",
    "milli": "millis",
    "ms": "millis",
    "seconds": "seconds",
    "second": "seconds",
    "secs": "seconds",
    "sec": "seconds",
    "s": "seconds",
    "minutes": "minutes",
    "minute": "minutes",
    "mins": "minutes",
    "min": "minutes",
    "hours": "hours",
    "hour": "hours",
    "h": "hours",
    "days": "days",
    "day": "days",
    "d": "days",
    "weeks": "weeks",
    "week": "weeks",
    "w": "weeks",
    "months": "months",
    "month": "months",
    "mo": "months",
    "years": "years",
    "year": "years",
    "y": "years",
}

# Narrower set accepted by the deprecated parse_duration
_LEGACY_UNITS: frozenset[Unit] = frozenset(
    {"millis", "seconds", "minutes", "hours", "days"}
)
_LEGACY_SPELLINGS: dict[str, Unit] = {
    spelling: unit for spelling, unit in _SPELLINGS.items() if unit in _LEGACY_UNITS
}


def _compile(spellings: dict[str, Unit]) -> re.Pattern[str]:
    # Longest first, otherwise "days" would match just the "d"
    alternation = "|".join(sorted(spellings, key=len, reverse=True))
    return re.compile(rf"\s*(\d*)\s*({alternation})\s*", re.IGNORECASE)


_UNITS_PATTERN = _compile(_SPELLINGS)
_LEGACY_PATTERN = _compile(_LEGACY_SPELLINGS)

# YYYY-MM-DDTHH:MM:SS[.fraction] with an optional Z or UTC offset
_ISO_DATE_TIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})?"
)


class FormatError(ValueError):
    """Raised when text is neither "now", a relative amount, nor ISO-8601."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(
            f"Cannot parse time {text!r}.\n"
            f"Expected one of:\n"
            f"  'now'\n"
            f"  a relative amount, e.g. '2 hours', '5h 3min 34s', '1 month'\n"
            f"  an ISO-8601 date-time, e.g. '2025-01-15T09:30:00'"
        )


class UnitToken(NamedTuple):
    quantity: int
    unit: Unit


def tokenize(text: str) -> Iterator[UnitToken]:
    """Yield every quantity/unit pair found in ``text``, in order.

    A missing quantity counts as 1, so ``"day"`` is one day.
    """
    return _scan(text, _UNITS_PATTERN, _SPELLINGS)


def _scan(
    text: str, pattern: re.Pattern[str], spellings: dict[str, Unit]
) -> Iterator[UnitToken]:
    for match in pattern.finditer(text):
        digits, spelling = match.groups()
        quantity = int(digits) if digits else 1
        yield UnitToken(quantity, spellings[spelling.lower()])


def _collect(tokens: Iterator[UnitToken]) -> dict[Unit, int]:
    quantities: dict[Unit, int] = {}
    for token in tokens:
        quantities[token.unit] = token.quantity
    return quantities


def _fold(quantities: dict[Unit, int]) -> FixedDuration:
    total = 0
    for unit, quantity in quantities.items():
        if unit == "millis":
            total += quantity * NANOS_PER_MILLI
        else:
            total += quantity * SCALES[unit] * NANOS_PER_SECOND
    return FixedDuration.from_nanos(total)


def _classify(quantities: dict[Unit, int]) -> Amount:
    if FIXED_UNITS.isdisjoint(quantities):
        return CalendarPeriod(
            years=quantities.get("years", 0),
            months=quantities.get("months", 0),
            days=quantities.get("days", 0) + 7 * quantities.get("weeks", 0),
        )
    # Calendar units present alongside fixed ones use the fixed factors
    return _fold(quantities)


def parse_amount(text: str) -> Amount:
    """Parse an amount of time such as ``"1 day 20 seconds"``.

    Returns a FixedDuration when any of millis, seconds, minutes or hours
    appears in the text, otherwise a CalendarPeriod so that "1 month" keeps
    its calendar meaning.

    Example:
        >>> parse_amount("2 months")
        CalendarPeriod(years=0, months=2, days=0)
        >>> parse_amount("1 day 20 seconds")
        FixedDuration(seconds=86420, nanos=0)
    """
    amount = _classify(_collect(tokenize(text)))
    logger.debug("parse_amount(%r) -> %r", text, amount)
    return amount


@deprecated("parse_duration() is deprecated, use parse_amount()")
def parse_duration(text: str) -> FixedDuration:
    """Parse ``text`` as an exact duration, e.g. ``"5h 3min 34s"``.

    Only milliseconds, seconds, minutes, hours and days are recognized,
    and a day is exactly 24 hours.
    """
    return _fold(_collect(_scan(text, _LEGACY_PATTERN, _LEGACY_SPELLINGS)))


def _zone(tz: str | None) -> tzinfo:
    return tzlocal() if tz is None else ZoneInfo(tz)


def _coerce_now(now: datetime | None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        raise TypeError(
            f"now must be a timezone-aware datetime.\n"
            f"Got naive datetime: {now!r}\n"
            f"Hint: datetime(..., tzinfo=timezone.utc)"
        )
    return now.astimezone(timezone.utc)


def _before(now: datetime, amount: Amount, zone: tzinfo) -> datetime:
    if isinstance(amount, CalendarPeriod):
        # Calendar math happens on the local wall clock
        local = now.astimezone(zone)
        return (local - amount.to_relativedelta()).astimezone(timezone.utc)
    return now - amount.to_timedelta()


def _resolve(text: str, now: datetime, zone: tzinfo) -> datetime:
    if text.strip().lower() == "now":
        logger.debug("resolve %r: now", text)
        return now

    quantities = _collect(tokenize(text))
    if quantities:
        amount = _classify(quantities)
        logger.debug("resolve %r: %r before now", text, amount)
        return _before(now, amount, zone)

    literal = text.strip()
    if not _ISO_DATE_TIME.fullmatch(literal):
        raise FormatError(text)
    try:
        parsed = isoparse(literal)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=zone)
        instant = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise FormatError(text) from e
    logger.debug("resolve %r: ISO-8601 %s", text, parsed.isoformat())
    return instant


def resolve_instant(
    text: str, *, tz: str | None = None, now: datetime | None = None
) -> datetime:
    """
    Resolve ``text`` to an absolute instant.

    Args:
        text: "now", a relative amount ("2 hours", "1 month") meaning that
              long before now, or an ISO-8601 date-time
        tz: IANA timezone name used for calendar arithmetic and for ISO
            literals without an offset. Defaults to the system local zone.
        now: Timezone-aware reading of the current time. Defaults to the
             system clock.

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        FormatError: If the text matches none of the accepted shapes

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2025, 3, 31, 12, 0, tzinfo=timezone.utc)
        >>> resolve_instant("1 month", tz="UTC", now=now)
        datetime.datetime(2025, 2, 28, 12, 0, tzinfo=datetime.timezone.utc)
    """
    return _resolve(text, _coerce_now(now), _zone(tz))


def resolve_interval(
    text: str, *, tz: str | None = None, now: datetime | None = None
) -> TimeInterval:
    """
    Resolve ``text`` to the interval between that instant and now.

    The current time is read once, so the end of the interval and the
    anchor used to compute its start are the same instant. Arguments are
    as for ``resolve_instant``; "now" yields a zero-width interval.
    """
    current = _coerce_now(now)
    start = _resolve(text, current, _zone(tz))
    return TimeInterval(start=start, end=current)
