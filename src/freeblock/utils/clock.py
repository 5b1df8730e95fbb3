"""Timestamp helpers for block metadata and document exports."""
from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision, e.g. 2025-08-05T10:15:30.123Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
