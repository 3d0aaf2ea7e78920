"""Timestamp-based ids for user-created records."""

from datetime import datetime


def timestamp_id(prefix: str, now: datetime, taken) -> str:
    """Build ``<prefix>_<epoch millis>``, bumping the millis past ids in ``taken``."""
    millis = int(now.timestamp() * 1000)
    while f"{prefix}_{millis}" in taken:
        millis += 1
    return f"{prefix}_{millis}"
