"""Combinator engine: merge, intersect, gap and diff.

Every result is a new Period built through the validating constructor.
"""

from __future__ import annotations

import logging

from period_primitives.duration import instant
from period_primitives.period import Period
from period_primitives.predicates import abuts, overlaps
from period_primitives.types import NoOverlapError

logger = logging.getLogger(__name__)


def merge(period: Period, *periods: Period) -> Period:
    """Return the smallest period spanning every operand.

    Succeeds for disjoint inputs too: the result then covers time that no
    operand covers.

    Raises:
        TypeError: If no other period is given.
    """
    if not periods:
        raise TypeError("merge() requires at least one other period")

    start = period.start
    end = period.end
    for other in periods:
        if instant(other.start) < instant(start):
            start = other.start
        if instant(other.end) > instant(end):
            end = other.end

    if logger.isEnabledFor(logging.DEBUG):
        covered = all(
            overlaps(period, other) or abuts(period, other) for other in periods
        )
        if not covered:
            logger.debug(
                "merge spans uncovered time: %s and %d other period(s) -> %s/%s",
                period, len(periods), start.isoformat(), end.isoformat(),
            )
    return Period(start, end)


def intersect(a: Period, b: Period) -> Period:
    """Return the time shared by both periods.

    Raises:
        NoOverlapError: If the periods do not overlap.
    """
    if not overlaps(a, b):
        raise NoOverlapError(a, b)

    start = a.start if instant(a.start) >= instant(b.start) else b.start
    end = a.end if instant(a.end) <= instant(b.end) else b.end
    return Period(start, end)


def gap(a: Period, b: Period) -> Period:
    """Return the period strictly between two disjoint periods.

    Abutting periods give the zero-duration period at their shared boundary.
    Overlapping periods give the zero-duration period at the earlier of the
    two ends.
    """
    if overlaps(a, b):
        anchor = a.end if instant(a.end) <= instant(b.end) else b.end
        logger.debug("gap between overlapping %s and %s is empty", a, b)
        return Period(anchor, anchor)

    if instant(a.end) <= instant(b.start):
        return Period(a.end, b.start)
    return Period(b.end, a.start)


def diff(a: Period, b: Period) -> tuple[Period, ...]:
    """Return the parts covered by exactly one of two overlapping periods.

    Pieces are in chronological order; zero-duration pieces are dropped, so
    the result holds zero, one or two periods.

    Raises:
        NoOverlapError: If the periods do not overlap.
    """
    shared = intersect(a, b)
    first_start = a.start if instant(a.start) <= instant(b.start) else b.start
    last_end = a.end if instant(a.end) >= instant(b.end) else b.end

    pieces = (Period(first_start, shared.start), Period(shared.end, last_end))
    return tuple(p for p in pieces if not p.is_empty())
