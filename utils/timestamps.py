"""
ISO-8601 helpers for timestamp fields.
Inbound strings become timezone-aware datetimes; outbound instants are rendered
the way the remote API expects them: UTC, millisecond precision, trailing ``Z``.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from pydantic import TypeAdapter

Instant = Union[datetime, date, str, int, float]

_datetime_adapter = TypeAdapter(datetime)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a wire timestamp. Falsy input (None, "") means no value."""
    if not value:
        return None
    parsed = _datetime_adapter.validate_python(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_datetime(value: Instant) -> datetime:
    """
    Coerce an instant to an aware datetime.
    Numbers are epoch milliseconds; naive datetimes and bare dates are taken as UTC.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=timezone.utc)
    if isinstance(value, bool):
        raise TypeError(f"not an instant: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    if isinstance(value, str):
        parsed = parse_timestamp(value)
        if parsed is None:
            raise ValueError("empty timestamp string")
        return parsed
    raise TypeError(f"not an instant: {value!r}")


def format_timestamp(value: Instant) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    dt = to_datetime(value).astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")
