"""period-primitives: Half-open time ranges and the algebra over them."""

from period_primitives.combinators import diff, gap, intersect, merge
from period_primitives.decompose import (
    DateRange,
    SplitSequence,
    date_range,
    split,
    split_backwards,
)
from period_primitives.duration import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    Duration,
)
from period_primitives.period import Period
from period_primitives.predicates import (
    Index,
    abuts,
    compare_duration,
    contains,
    duration_greater_than,
    duration_less_than,
    is_after,
    is_before,
    overlaps,
    same_duration_as,
    same_value_as,
)
from period_primitives.translate import (
    ending_on,
    expand,
    move,
    move_end_date,
    move_start_date,
    starting_on,
    with_duration,
    with_duration_before_end,
)
from period_primitives.types import (
    InvalidIntervalError,
    InvalidRangeError,
    NoOverlapError,
    PeriodError,
)

__all__ = [
    "DAY",
    "DateRange",
    "Duration",
    "HOUR",
    "Index",
    "InvalidIntervalError",
    "InvalidRangeError",
    "MINUTE",
    "MONTH",
    "NoOverlapError",
    "Period",
    "PeriodError",
    "SECOND",
    "SplitSequence",
    "WEEK",
    "YEAR",
    "abuts",
    "compare_duration",
    "contains",
    "date_range",
    "diff",
    "duration_greater_than",
    "duration_less_than",
    "ending_on",
    "expand",
    "gap",
    "intersect",
    "is_after",
    "is_before",
    "merge",
    "move",
    "move_end_date",
    "move_start_date",
    "overlaps",
    "same_duration_as",
    "same_value_as",
    "split",
    "split_backwards",
    "starting_on",
    "with_duration",
    "with_duration_before_end",
]
