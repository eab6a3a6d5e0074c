"""
Domain time utilities (pure).

Sale dates are always stored as timezone-aware UTC timestamps.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def require_utc_timestamp(name: str, value: datetime) -> None:
    """
    Guard for sale dates and the demo seeding reference time.

    A sale date is compared and grouped against other sale dates, so a naive
    value or one carrying a local offset is refused. `name` is the field
    being checked and appears in the error message.
    """

    offset = value.utcoffset()
    if offset is None:
        raise ValueError(f"{name} has no timezone; sale dates are stored in UTC")
    if offset != timedelta(0):
        raise ValueError(f"{name} has UTC offset {offset}; sale dates are stored in UTC")


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""

    return datetime.now(timezone.utc)
