"""ISO 8601 datetime conversion utilities.

This module centralizes all transformations between Python datetime objects,
ISO 8601 strings and Unix timestamps. All date/time operations should use
these functions to ensure consistency across the codebase.

Naive datetimes are always treated as UTC.
"""

from datetime import datetime, UTC


def as_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned as-is."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def to_timestamp(dt: datetime) -> str:
    """Convert datetime to ISO 8601 UTC timestamp string."""
    return as_utc(dt).astimezone(UTC).isoformat().replace("+00:00", "Z")


def utcnow() -> datetime:
    """Get current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_unix(dt: datetime) -> int:
    """Convert datetime to whole Unix seconds."""
    return int(as_utc(dt).timestamp())


def from_unix(ts: int | float) -> datetime:
    """Convert Unix seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(ts, UTC)
