"""Shared types: the PeriodError hierarchy."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from period_primitives.period import Period


class PeriodError(Exception):
    """Base class for every caller-correctable period error."""


class InvalidRangeError(PeriodError, ValueError):
    """Raised when a period would end before it starts."""

    def __init__(self, start: datetime, end: datetime) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Invalid range: start {start.isoformat()} is after "
            f"end {end.isoformat()}"
        )


class NoOverlapError(PeriodError):
    """Raised when an operation needs two overlapping periods."""

    def __init__(self, first: Period, second: Period) -> None:
        self.first = first
        self.second = second
        super().__init__(f"Periods {first} and {second} do not overlap")


class InvalidIntervalError(PeriodError, ValueError):
    """Raised when a step cannot make forward progress through a period."""

    def __init__(self, interval: Any, reason: str) -> None:
        self.interval = interval
        self.reason = reason
        super().__init__(f"Invalid interval {interval!r}: {reason}")
