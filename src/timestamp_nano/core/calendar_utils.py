"""Calendar helpers over ``datetime``.

All instants here are timezone-aware UTC datetimes at microsecond
resolution.  Anything the ``datetime`` constructor or arithmetic rejects
is re-raised as :class:`InvalidCalendarField`.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone

from .constants import EPOCH, MAX_YEAR, MIN_YEAR, ONE_MICROSECOND
from .errors import InvalidCalendarField


def as_utc(dt: datetime) -> datetime:
    """Read naive datetimes as UTC, convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def build_instant(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a UTC instant from calendar fields.

    ``year`` through ``millisecond`` must be within their natural ranges.
    ``microsecond`` is an offset added after construction and may be any
    integer.
    """
    if not 0 <= millisecond <= 999:
        raise InvalidCalendarField(f"millisecond must be in 0..999, got {millisecond}")
    try:
        base = datetime(
            year, month, day, hour, minute, second,
            millisecond * 1000, tzinfo=timezone.utc,
        )
    except (ValueError, OverflowError) as exc:
        raise InvalidCalendarField(
            f"Invalid calendar fields {year:04d}-{month:02d}-{day:02d} "
            f"{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}: {exc}"
        ) from exc
    try:
        return base + timedelta(microseconds=microsecond)
    except OverflowError as exc:
        raise InvalidCalendarField(
            f"Adding {microsecond} microseconds to {base.isoformat()} "
            "leaves the calendar range"
        ) from exc


def microseconds_since_epoch(dt: datetime) -> int:
    """Whole microseconds between the Unix epoch and *dt* (may be negative)."""
    return (as_utc(dt) - EPOCH) // ONE_MICROSECOND


def from_microseconds_since_epoch(micros: int) -> datetime:
    return EPOCH + timedelta(microseconds=micros)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(dt: datetime, months: int) -> datetime:
    """Shift *dt* by whole calendar months.

    The day of month is clamped to the length of the target month
    (Jan 31 + 1 month -> Feb 28/29); the time of day is kept.
    """
    total = dt.year * 12 + (dt.month - 1) + months
    year, month_index = divmod(total, 12)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidCalendarField(
            f"Adding {months} months to {dt.isoformat()} gives year {year}, "
            f"outside {MIN_YEAR}..{MAX_YEAR}"
        )
    month = month_index + 1
    day = min(dt.day, days_in_month(year, month))
    return dt.replace(year=year, month=month, day=day)
