"""Translator/builder: derive a new period by moving one or both endpoints.

Every function returns a new Period through the validating constructor, so
any result that would end before it starts raises InvalidRangeError and the
source period is left as it was. ``move`` is the exception: it cannot fail.
"""

from __future__ import annotations

from datetime import datetime

from period_primitives.duration import Duration, instant, negate, shift
from period_primitives.period import Period


def starting_on(period: Period, start: datetime) -> Period:
    """Replace the start. Fails if it falls after the end."""
    return Period(start, period.end)


def ending_on(period: Period, end: datetime) -> Period:
    """Replace the end. Fails if it falls before the start."""
    return Period(period.start, end)


def with_duration(period: Period, interval: Duration | int | float) -> Period:
    """Keep the start, set the end to ``start + interval``."""
    return Period(period.start, shift(period.start, interval))


def with_duration_before_end(
    period: Period, interval: Duration | int | float
) -> Period:
    """Keep the end, set the start to ``end - interval``."""
    return Period(shift(period.end, negate(interval)), period.end)


def move(period: Period, interval: Duration | int | float) -> Period:
    """Shift both endpoints by the same interval. Never fails on ordering.

    Month-end clamping can pull both endpoints onto the same day and leave
    the shifted end before the shifted start (Jan 29 12:00 to Jan 30 00:00
    moved by one month in a non-leap year). The end is then held at the
    shifted start, giving a zero-duration period.
    """
    start = shift(period.start, interval)
    end = max(start, shift(period.end, interval), key=instant)
    return Period(start, end)


def move_start_date(period: Period, interval: Duration | int | float) -> Period:
    """Shift the start only. Fails if it crosses the end."""
    return Period(shift(period.start, interval), period.end)


def move_end_date(period: Period, interval: Duration | int | float) -> Period:
    """Shift the end only. Fails if it crosses the start."""
    return Period(period.start, shift(period.end, interval))


def expand(period: Period, interval: Duration | int | float) -> Period:
    """Subtract the interval from the start and add it to the end.

    A negative interval shrinks the period; shrinking past the midpoint
    fails.
    """
    return Period(
        shift(period.start, negate(interval)), shift(period.end, interval)
    )
