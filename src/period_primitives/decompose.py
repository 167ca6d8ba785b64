"""Decomposer: split a period into contiguous sub-periods, or step through it.

The returned objects are lazy and restartable. They hold only the immutable
source period and the interval; each ``iter()`` walks again from scratch, so
independent consumers never share a cursor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from period_primitives.duration import (
    Duration,
    as_duration,
    instant,
    negate,
    shift,
)
from period_primitives.period import Period
from period_primitives.types import InvalidIntervalError

logger = logging.getLogger(__name__)


def _step(cursor: datetime, interval: Duration, backwards: bool) -> datetime:
    """Move the cursor one interval, failing if it does not move."""
    nxt = shift(cursor, negate(interval) if backwards else interval)
    if backwards:
        moved = instant(nxt) < instant(cursor)
    else:
        moved = instant(nxt) > instant(cursor)
    if not moved:
        direction = "backward" if backwards else "forward"
        raise InvalidIntervalError(
            interval,
            f"no {direction} progress from {cursor.isoformat()} "
            f"(got {nxt.isoformat()})",
        )
    return nxt


def _validated(
    period: Period, interval: Duration | int | float, backwards: bool = False
) -> Duration:
    interval = as_duration(interval)
    # Probe at the anchor so a zero or negative step fails at call time.
    _step(period.end if backwards else period.start, interval, backwards)
    return interval


@dataclass(frozen=True)
class SplitSequence:
    """Restartable, ordered sequence of sub-periods covering ``period``.

    Forward: chunks run left to right, the first starts at ``period.start``,
    the last ends at ``period.end`` and may be shorter than the interval.

    Backwards: chunks run right to left, the first ends at ``period.end``,
    the last starts at ``period.start`` and may be shorter than the interval.
    """

    period: Period
    interval: Duration
    backwards: bool = False

    def __iter__(self) -> Iterator[Period]:
        if self.backwards:
            return self._walk_backwards()
        return self._walk_forwards()

    def _walk_forwards(self) -> Iterator[Period]:
        boundary = instant(self.period.end)
        cursor = self.period.start
        count = 0
        while instant(cursor) < boundary:
            nxt = _step(cursor, self.interval, backwards=False)
            if instant(nxt) > boundary:
                nxt = self.period.end
            yield Period(cursor, nxt)
            count += 1
            cursor = nxt
        logger.debug(
            "split %s by %r into %d chunk(s)", self.period, self.interval, count
        )

    def _walk_backwards(self) -> Iterator[Period]:
        boundary = instant(self.period.start)
        cursor = self.period.end
        count = 0
        while instant(cursor) > boundary:
            nxt = _step(cursor, self.interval, backwards=True)
            if instant(nxt) < boundary:
                nxt = self.period.start
            yield Period(nxt, cursor)
            count += 1
            cursor = nxt
        logger.debug(
            "split %s backwards by %r into %d chunk(s)",
            self.period, self.interval, count,
        )


@dataclass(frozen=True)
class DateRange:
    """Restartable fixed-step datepoints: start, start + i, ... while < end."""

    period: Period
    interval: Duration
    exclude_start: bool = False

    def __iter__(self) -> Iterator[datetime]:
        boundary = instant(self.period.end)
        cursor = self.period.start
        if not self.exclude_start and instant(cursor) < boundary:
            yield cursor
        while instant(cursor) < boundary:
            cursor = _step(cursor, self.interval, backwards=False)
            if instant(cursor) < boundary:
                yield cursor


def split(period: Period, interval: Duration | int | float) -> SplitSequence:
    """Split ``period`` into consecutive chunks of ``interval``, earliest first.

    Raises:
        InvalidIntervalError: If the interval does not move time forward.
    """
    return SplitSequence(period, _validated(period, interval))


def split_backwards(
    period: Period, interval: Duration | int | float
) -> SplitSequence:
    """Split ``period`` from its end, latest chunk first.

    Reverse the result for chronological order.

    Raises:
        InvalidIntervalError: If the interval does not move time forward.
    """
    interval = _validated(period, interval, backwards=True)
    return SplitSequence(period, interval, backwards=True)


def date_range(
    period: Period,
    interval: Duration | int | float,
    *,
    exclude_start: bool = False,
) -> DateRange:
    """Datepoints from ``period.start`` stepping by ``interval`` up to ``end``.

    The end is excluded, like the period itself.
    """
    return DateRange(period, _validated(period, interval), exclude_start)
