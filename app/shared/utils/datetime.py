"""
UTC datetime utilities for response timestamps.

All datetime values exposed by the API are timezone-aware UTC.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def utc_now_iso() -> str:
    """
    Return the current UTC time as an ISO 8601 string with millisecond precision.

    Example: '2025-01-31T09:15:02.123Z'
    """
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
