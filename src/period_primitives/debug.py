"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from typing import Sequence

from period_primitives.duration import instant, seconds_between, shift
from period_primitives.period import Period

# Characters per row and the glyphs used to draw it
DEFAULT_WIDTH = 60
COVERED = "#"
INSTANT = "|"
EMPTY = "."


def _row(period: Period, window: Period, width: int) -> str:
    """Draw one period against the window, one char per time slice."""
    total = window.timestamp_interval
    row = list(EMPTY * width)

    if period.is_empty():
        # Zero-duration periods are drawn as a single tick, if visible.
        if window.contains(period.start):
            offset = seconds_between(window.start, period.start)
            row[min(int(offset / total * width), width - 1)] = INSTANT
        return "".join(row)

    slice_seconds = total / width
    for i in range(width):
        slice_start = shift(window.start, i * slice_seconds)
        slice_end = shift(window.start, (i + 1) * slice_seconds)
        if (
            instant(period.start) < instant(slice_end)
            and instant(slice_start) < instant(period.end)
        ):
            row[i] = COVERED
    return "".join(row)


def show_periods(
    periods: Sequence[Period],
    window: Period,
    width: int = DEFAULT_WIDTH,
    labels: Sequence[str] | None = None,
) -> str:
    """Print an ASCII timeline with one row per period.

    Legend: '#' = covered, '|' = zero-duration period, '.' = not covered.
    Returns the string and also prints to stdout.

    Args:
        periods: Periods to draw.
        window: The time span represented by the full row width.
        width: Characters per row.
        labels: Optional row labels, defaults to P0, P1, ...
    """
    if window.is_empty():
        raise ValueError("window must have a positive duration")

    if labels is None:
        labels = [f"P{i}" for i in range(len(periods))]
    label_width = max((len(label) for label in labels), default=0)

    lines: list[str] = []
    lines.append(
        f"{'':>{label_width}s}  {window.start.isoformat()} .. {window.end.isoformat()}"
    )
    for label, period in zip(labels, periods):
        lines.append(f"{label:>{label_width}s}  {_row(period, window, width)}")

    result = "\n".join(lines)
    print(result)
    return result
