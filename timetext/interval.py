from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, kw_only=True)
class TimeInterval:
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for edge, value in (("start", self.start), ("end", self.end)):
            if value.tzinfo is None:
                raise TypeError(
                    f"TimeInterval {edge} must be a timezone-aware datetime, "
                    f"got naive {value!r}"
                )

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return (
            f"TimeInterval({self.start.isoformat()}→{self.end.isoformat()}, "
            f"{self.duration.total_seconds()}s)"
        )
