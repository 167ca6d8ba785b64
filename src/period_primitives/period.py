"""Period: an immutable, bounded, half-open ``[start, end)`` time range.

The value type only holds and validates its two datepoints. Behaviour lives
in the engine modules (predicates, combinators, decompose, translate); the
methods here are the object-style front door onto them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Iterable

from dateutil.relativedelta import relativedelta

from period_primitives.duration import (
    Duration,
    absolute_between,
    calendar_between,
    ensure_compatible,
    ensure_datepoint,
    instant,
)
from period_primitives.types import InvalidRangeError

if TYPE_CHECKING:
    from period_primitives.decompose import SplitSequence
    from period_primitives.predicates import Index


@dataclass(frozen=True, eq=False)
class Period:
    """Immutable time range. Start included, end excluded.

    Invariants:
        - start <= end, compared as instants
        - start and end are both naive or both aware
        - start == end is legal and represents a single instant
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        ensure_datepoint(self.start, "start")
        ensure_datepoint(self.end, "end")
        ensure_compatible(self.start, self.end)
        if instant(self.start) > instant(self.end):
            raise InvalidRangeError(self.start, self.end)

    @classmethod
    def between(cls, a: datetime, b: datetime) -> Period:
        """Build a period from two datepoints given in either order."""
        ensure_datepoint(a, "a")
        ensure_datepoint(b, "b")
        ensure_compatible(a, b)
        if instant(b) < instant(a):
            a, b = b, a
        return cls(a, b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self.same_value_as(other)

    def __hash__(self) -> int:
        return hash((instant(self.start), instant(self.end)))

    def __str__(self) -> str:
        """ISO-8601 time interval: ``<start>/<end>``."""
        return f"{self.start.isoformat()}/{self.end.isoformat()}"

    # ------------------------------------------------------------------
    # Duration accessors
    # ------------------------------------------------------------------

    @property
    def timestamp_interval(self) -> float:
        """Elapsed seconds between start and end. Never negative."""
        return absolute_between(self.start, self.end).total_seconds()

    @property
    def duration(self) -> timedelta:
        """Elapsed time between start and end as a timedelta."""
        return absolute_between(self.start, self.end)

    @property
    def date_interval(self) -> relativedelta:
        """Calendar-aware length, e.g. ``relativedelta(months=+1)``."""
        return calendar_between(self.start, self.end)

    def is_empty(self) -> bool:
        """Whether the period is a single instant."""
        return instant(self.start) == instant(self.end)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def same_value_as(self, other: Period) -> bool:
        from period_primitives.predicates import same_value_as
        return same_value_as(self, other)

    def abuts(self, other: Period) -> bool:
        from period_primitives.predicates import abuts
        return abuts(self, other)

    def overlaps(self, other: Period) -> bool:
        from period_primitives.predicates import overlaps
        return overlaps(self, other)

    def is_before(self, index: Index) -> bool:
        from period_primitives.predicates import is_before
        return is_before(self, index)

    def is_after(self, index: Index) -> bool:
        from period_primitives.predicates import is_after
        return is_after(self, index)

    def contains(self, index: Index) -> bool:
        from period_primitives.predicates import contains
        return contains(self, index)

    def __contains__(self, index: Index) -> bool:
        return self.contains(index)

    def compare_duration(self, other: Period) -> int:
        from period_primitives.predicates import compare_duration
        return compare_duration(self, other)

    def duration_greater_than(self, other: Period) -> bool:
        from period_primitives.predicates import duration_greater_than
        return duration_greater_than(self, other)

    def duration_less_than(self, other: Period) -> bool:
        from period_primitives.predicates import duration_less_than
        return duration_less_than(self, other)

    def same_duration_as(self, other: Period) -> bool:
        from period_primitives.predicates import same_duration_as
        return same_duration_as(self, other)

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def merge(self, *periods: Period) -> Period:
        from period_primitives.combinators import merge
        return merge(self, *periods)

    def intersect(self, other: Period) -> Period:
        from period_primitives.combinators import intersect
        return intersect(self, other)

    def gap(self, other: Period) -> Period:
        from period_primitives.combinators import gap
        return gap(self, other)

    def diff(self, other: Period) -> tuple[Period, ...]:
        from period_primitives.combinators import diff
        return diff(self, other)

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    def split(self, interval: Duration | int | float) -> SplitSequence:
        from period_primitives.decompose import split
        return split(self, interval)

    def split_backwards(self, interval: Duration | int | float) -> SplitSequence:
        from period_primitives.decompose import split_backwards
        return split_backwards(self, interval)

    def date_range(
        self, interval: Duration | int | float, *, exclude_start: bool = False
    ) -> Iterable[datetime]:
        from period_primitives.decompose import date_range
        return date_range(self, interval, exclude_start=exclude_start)

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def starting_on(self, start: datetime) -> Period:
        from period_primitives.translate import starting_on
        return starting_on(self, start)

    def ending_on(self, end: datetime) -> Period:
        from period_primitives.translate import ending_on
        return ending_on(self, end)

    def with_duration(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import with_duration
        return with_duration(self, interval)

    def with_duration_before_end(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import with_duration_before_end
        return with_duration_before_end(self, interval)

    def move(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import move
        return move(self, interval)

    def move_start_date(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import move_start_date
        return move_start_date(self, interval)

    def move_end_date(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import move_end_date
        return move_end_date(self, interval)

    def expand(self, interval: Duration | int | float) -> Period:
        from period_primitives.translate import expand
        return expand(self, interval)
