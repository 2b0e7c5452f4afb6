"""DateTime utility functions for Taskpad."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the form the database stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def format_created_at(dt: datetime, timezone_name: str = 'UTC') -> str:
    """
    Format a task's creation timestamp for display.

    Args:
        dt: UTC datetime to format (timezone-aware or naive UTC)
        timezone_name: IANA timezone name (e.g., 'America/Denver')

    Returns:
        Formatted string like "Nov 22, 2025 7:13 AM"

    Examples:
        >>> dt = datetime(2025, 11, 22, 14, 13, 45, tzinfo=timezone.utc)
        >>> format_created_at(dt, 'America/Denver')
        'Nov 22, 2025 7:13 AM'

    Notes:
        - If timezone_name is invalid, falls back to UTC
        - If dt is naive (no timezone), assumes UTC
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    try:
        local_dt = dt.astimezone(ZoneInfo(timezone_name))
    except (ZoneInfoNotFoundError, ValueError):
        local_dt = dt.astimezone(timezone.utc)

    hour = local_dt.hour % 12 or 12
    return f"{local_dt:%b} {local_dt.day}, {local_dt.year} {hour}:{local_dt:%M %p}"
