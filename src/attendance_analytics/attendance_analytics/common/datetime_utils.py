from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Iterator

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def now_in(tz: tzinfo) -> datetime:
    """Current time in the given timezone.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz)


def as_utc(value: datetime | date) -> datetime:
    """Aware UTC datetime; naive values are UTC already (that is how the event store keeps them)."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def local_date(value: datetime | date, tz: tzinfo) -> date:
    """Calendar day of a timestamp in the reference timezone."""
    if not isinstance(value, datetime):
        return value
    return as_utc(value).astimezone(tz).date()


def day_bounds_utc(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """First and last instant of a local day, expressed as naive UTC datetimes."""
    start = datetime.combine(day, time.min, tzinfo=tz).astimezone(timezone.utc)
    end = datetime.combine(day, time.max, tzinfo=tz).astimezone(timezone.utc)
    return start.replace(tzinfo=None), end.replace(tzinfo=None)


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def month_abbr(month: int) -> str:
    return _MONTH_ABBR[month - 1]


def shift_month(day: date, months: int) -> date:
    """First day of the month `months` away from `day`'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)
