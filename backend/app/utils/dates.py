"""
Date helpers shared by models and services.
Timestamps are stored as naive UTC.
"""

from datetime import date, datetime, timedelta, timezone


def utcnow() -> datetime:
    """Current UTC time without tzinfo, matching the stored column type."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def today() -> date:
    return utcnow().date()


def days_from_today(days: int) -> date:
    return today() + timedelta(days=days)
