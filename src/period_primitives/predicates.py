"""Predicate engine: boundary rules over one or two periods.

Half-open semantics throughout. Touching periods abut, they never overlap.
All comparisons are made on instants (see ``duration.instant``).

``is_before``, ``is_after`` and ``contains`` accept an ``Index``: either a
datetime or a Period. Each shape has its own registered implementation.
"""

from __future__ import annotations

from datetime import datetime
from functools import singledispatch
from typing import Union

from period_primitives.duration import ensure_compatible, instant
from period_primitives.period import Period

Index = Union[datetime, Period]


def _unsupported(index: object) -> TypeError:
    return TypeError(
        f"index must be a datetime or a Period, "
        f"got {type(index).__name__}: {index!r}"
    )


def same_value_as(a: Period, b: Period) -> bool:
    """Both periods share the same start and the same end."""
    return (
        instant(a.start) == instant(b.start)
        and instant(a.end) == instant(b.end)
    )


def abuts(a: Period, b: Period) -> bool:
    """Exactly one boundary instant is shared, end to start. Symmetric."""
    a_then_b = instant(a.end) == instant(b.start)
    b_then_a = instant(b.end) == instant(a.start)
    return a_then_b != b_then_a


def overlaps(a: Period, b: Period) -> bool:
    """Strict overlap. Symmetric.

    Two zero-duration periods never overlap, even when equal.
    """
    return (
        instant(a.start) < instant(b.end)
        and instant(b.start) < instant(a.end)
    )


# ----------------------------------------------------------------------
# Index-dispatched predicates
# ----------------------------------------------------------------------


@singledispatch
def _ends_before(index: object, period: Period) -> bool:
    raise _unsupported(index)


@_ends_before.register(datetime)
def _(index: datetime, period: Period) -> bool:
    ensure_compatible(period.end, index)
    return instant(period.end) <= instant(index)


@_ends_before.register(Period)
def _(index: Period, period: Period) -> bool:
    return instant(period.end) <= instant(index.start)


@singledispatch
def _starts_after(index: object, period: Period) -> bool:
    raise _unsupported(index)


@_starts_after.register(datetime)
def _(index: datetime, period: Period) -> bool:
    ensure_compatible(period.start, index)
    return instant(period.start) >= instant(index)


@_starts_after.register(Period)
def _(index: Period, period: Period) -> bool:
    return instant(period.start) >= instant(index.end)


@singledispatch
def _encloses(index: object, period: Period) -> bool:
    raise _unsupported(index)


@_encloses.register(datetime)
def _(index: datetime, period: Period) -> bool:
    ensure_compatible(period.start, index)
    point = instant(index)
    if period.is_empty():
        # An instant period contains exactly its own instant.
        return point == instant(period.start)
    return instant(period.start) <= point < instant(period.end)


@_encloses.register(Period)
def _(index: Period, period: Period) -> bool:
    return (
        instant(period.start) <= instant(index.start)
        and instant(index.end) <= instant(period.end)
    )


def is_before(period: Period, index: Index) -> bool:
    """The period ends at or before the datetime, or the other period's start."""
    return _ends_before(index, period)


def is_after(period: Period, index: Index) -> bool:
    """The period starts at or after the datetime, or the other period's end."""
    return _starts_after(index, period)


def contains(period: Period, index: Index) -> bool:
    """Whether the datetime or period lies entirely within ``period``.

    For a datetime: ``start <= index < end``, except that a zero-duration
    period contains its own instant. For a period: ``start <= index.start``
    and ``index.end <= end``.
    """
    return _encloses(index, period)


# ----------------------------------------------------------------------
# Duration comparison
# ----------------------------------------------------------------------


def compare_duration(a: Period, b: Period) -> int:
    """Three-way comparison of elapsed durations: -1, 0 or 1."""
    da = a.duration
    db = b.duration
    return (da > db) - (da < db)


def duration_greater_than(a: Period, b: Period) -> bool:
    return compare_duration(a, b) == 1


def duration_less_than(a: Period, b: Period) -> bool:
    return compare_duration(a, b) == -1


def same_duration_as(a: Period, b: Period) -> bool:
    return compare_duration(a, b) == 0
