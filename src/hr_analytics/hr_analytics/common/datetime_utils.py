from __future__ import annotations

from datetime import date, datetime, timedelta

SECONDS_PER_DAY = 24 * 60 * 60


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def as_datetime(value: date | datetime) -> datetime:
    """Promote a plain date to midnight of that day."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def window_start(now: datetime, days: int) -> datetime:
    return now - timedelta(days=int(days))


def whole_days_between(earlier: date | datetime, later: datetime) -> int:
    """Floor of the elapsed days from ``earlier`` to ``later`` (may be negative)."""
    delta = later - as_datetime(earlier)
    return int(delta.total_seconds() // SECONDS_PER_DAY)
