"""Timezone-aware date/time helpers for the reservation portal."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from flask import current_app


def get_timezone() -> ZoneInfo:
    """Get the configured timezone."""
    tz_name = current_app.config.get('TIMEZONE', 'UTC')
    return ZoneInfo(tz_name)


def get_today() -> date:
    """Get today's date in the configured timezone."""
    return datetime.now(get_timezone()).date()



def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string (storage format)."""
    return datetime.now(timezone.utc).isoformat(timespec='seconds')


def parse_timestamp(value) -> datetime:
    """
    Parse a stored or submitted timestamp into an aware datetime.

    Accepts datetime objects and ISO-8601 strings, including a trailing 'Z'.
    Naive values are taken as UTC.

    Args:
        value: datetime or ISO-8601 string

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value is empty or not a valid timestamp
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def to_timezone(value: datetime, tz=None) -> datetime:
    """Convert an aware datetime to tz, or leave it in its own offset."""
    return value.astimezone(tz) if tz is not None else value
