"""Timestamp formatting for page records."""

from __future__ import annotations

from datetime import datetime, timezone

# Strict output format: YYYY-MM-DD HH:MM:SS.ffffff+0000
STRICT_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"


def now_utc() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def format_datetime(dt: datetime) -> str:
    """Format a datetime to the strict output format.

    Aware datetimes are converted to UTC so that stored strings sort
    lexically in chronological order. Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime(STRICT_FORMAT)


def timestamp_now() -> str:
    """Return the current time in the strict output format."""
    return format_datetime(now_utc())
