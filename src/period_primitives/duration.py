"""Boundary: Duration — calendar vs absolute arithmetic on datetimes.

Two duration shapes cross this boundary:

- Calendar: ``relativedelta``. Applied in wall-clock time, so "1 month" from
  Jan 31 lands on the last day of February and "1 day" across a DST change
  is 23 or 25 elapsed hours.
- Absolute: ``timedelta``. A fixed number of elapsed seconds. For aware
  datetimes it is applied on the UTC timeline and converted back to the
  datepoint's own zone.

All ordering inside the package goes through ``instant()``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Union

from dateutil.relativedelta import relativedelta

Duration = Union[relativedelta, timedelta]


def ensure_datepoint(dt: datetime, name: str) -> datetime:
    """Reject anything that is not a ``datetime`` (plain ``date`` included)."""
    if not isinstance(dt, datetime):
        raise TypeError(
            f"{name} must be a datetime, got {type(dt).__name__}: {dt!r}"
        )
    return dt


def ensure_compatible(a: datetime, b: datetime) -> None:
    """Reject a naive/aware pair. They have no common ordering."""
    if (a.tzinfo is None) != (b.tzinfo is None):
        raise TypeError(
            f"cannot mix naive and timezone-aware datetimes: "
            f"{a.isoformat()} and {b.isoformat()}"
        )


def instant(dt: datetime) -> datetime:
    """Comparison key: UTC for aware datetimes, the datetime itself if naive.

    Aware datetimes sharing a tzinfo compare on wall time in Python, which
    breaks ordering inside a DST fold. Converting to UTC first does not.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc)


def as_duration(value: Duration | int | float) -> Duration:
    """Coerce a duration argument. Numbers are Absolute seconds."""
    if isinstance(value, (relativedelta, timedelta)):
        return value
    if isinstance(value, bool):
        raise TypeError(f"duration must not be a bool, got {value!r}")
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    raise TypeError(
        f"duration must be a relativedelta, timedelta or number of seconds, "
        f"got {type(value).__name__}: {value!r}"
    )


def negate(duration: Duration | int | float) -> Duration:
    """Return the duration pointing the other way."""
    return -as_duration(duration)


def shift(dt: datetime, duration: Duration | int | float) -> datetime:
    """Apply a duration to a datetime.

    Calendar durations use wall-clock arithmetic. Absolute durations on an
    aware datetime are added on the UTC timeline so the elapsed time is
    exactly the requested number of seconds.
    """
    duration = as_duration(duration)
    if isinstance(duration, relativedelta) or dt.tzinfo is None:
        return dt + duration
    return (dt.astimezone(timezone.utc) + duration).astimezone(dt.tzinfo)


def absolute_between(start: datetime, end: datetime) -> timedelta:
    """Elapsed time from start to end, computed on instants."""
    return instant(end) - instant(start)


def seconds_between(start: datetime, end: datetime) -> float:
    """Elapsed seconds from start to end (negative if end precedes start)."""
    return absolute_between(start, end).total_seconds()


def calendar_between(start: datetime, end: datetime) -> relativedelta:
    """Calendar-aware difference such that ``start + result == end``.

    The result is normalised by dateutil (e.g. ``relativedelta(months=+1)``
    for Jan 1 to Feb 1), so it may not match a hand-built duration of the
    same absolute length.
    """
    return relativedelta(end, start)


SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)
MONTH = relativedelta(months=1)
YEAR = relativedelta(years=1)
