from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.exceptions import ValidationError

SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600


def to_naive_local(value: datetime) -> datetime:
    """Stored datetimes are naive local time; offsets are converted away."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_iso_datetime(value: str, field_name: str = "Date") -> datetime:
    """Parse YYYY-MM-DD or YYYY-MM-DDTHH:MM[:SS][+HH:MM] into naive local datetime."""
    v = (value or "").strip()
    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid ISO date: {value!r}")
    return to_naive_local(parsed)


def parse_optional_datetime(value: Optional[str], field_name: str = "Date") -> Optional[datetime]:
    if value is None or not value.strip():
        return None
    return parse_iso_datetime(value, field_name)


def is_unset(value: Optional[date]) -> bool:
    """A missing bound is either None or the minimum datetime."""
    return value is None or value == datetime.min


def total_days(span: timedelta) -> float:
    return span.total_seconds() / SECONDS_PER_DAY


def total_hours(span: timedelta) -> float:
    return span.total_seconds() / SECONDS_PER_HOUR


def whole_days(span: timedelta) -> int:
    # timedelta.days floors negative spans; truncate toward zero instead.
    return int(span.total_seconds() / SECONDS_PER_DAY)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
