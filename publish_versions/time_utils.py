"""
Shared datetime helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def ensure_utc(dt: datetime) -> datetime:
    """Return a timezone-aware UTC datetime."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp and normalize it to UTC."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)


def is_later(value: str, other: str) -> bool:
    """True when timestamp ``value`` is strictly after ``other``.

    Unparsable timestamps never compare as later, on either side.
    """
    value_dt = parse_timestamp(value)
    other_dt = parse_timestamp(other)
    if value_dt is None or other_dt is None:
        return False
    return value_dt > other_dt
