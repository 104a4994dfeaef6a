"""
UTC clock helpers.

Timestamps are persisted as naive UTC values, so every comparison against
stored expiries must use naive UTC as well.
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC time without tzinfo."""
    return datetime.now(UTC).replace(tzinfo=None)
