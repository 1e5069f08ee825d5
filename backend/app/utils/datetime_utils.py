"""Datetime utility functions."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from app.config import settings

# Timezone for API responses (from config)
API_TIMEZONE = ZoneInfo(settings.timezone)


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(UTC)


def to_api_timezone(dt: datetime | None) -> datetime | None:
    """Convert a datetime to API timezone (from config).

    SQLite hands back naive datetimes; those are treated as UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(API_TIMEZONE)


def to_utc(dt: datetime) -> datetime:
    """Normalize client input to UTC; naive values are read as API-local time."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=API_TIMEZONE)
    return dt.astimezone(UTC)
