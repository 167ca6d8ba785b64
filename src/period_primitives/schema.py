"""Input validation for period and duration dictionaries."""

from __future__ import annotations

from datetime import datetime

from period_primitives.duration import instant

CALENDAR_FIELDS = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")


def _parse(value: object, label: str, errors: list[str]) -> datetime | None:
    try:
        return datetime.fromisoformat(value)  # type: ignore[arg-type]
    except (ValueError, TypeError) as e:
        errors.append(f"{label}: invalid datetime {value!r} - {e}")
        return None


def validate_period(data: dict) -> list[str]:
    """Validate a period dict. Returns list of error messages (empty = valid).

    Checks:
    - 'start' and 'end' are present and parse as ISO datetimes
    - Both are naive or both are aware
    - start <= end
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return [f"expected an object with start/end, got {data!r}"]

    for field in ("start", "end"):
        if field not in data:
            errors.append(f"missing '{field}'")
    if errors:
        return errors

    start = _parse(data["start"], "start", errors)
    end = _parse(data["end"], "end", errors)
    if start is None or end is None:
        return errors

    if (start.tzinfo is None) != (end.tzinfo is None):
        errors.append(
            f"start {data['start']!r} and end {data['end']!r} "
            f"mix naive and timezone-aware datetimes"
        )
    elif instant(start) > instant(end):
        errors.append(f"start {data['start']!r} is after end {data['end']!r}")

    return errors


def validate_duration(data: dict) -> list[str]:
    """Validate a duration dict. Returns list of error messages.

    Accepted shapes:
    - {"calendar": {"months": 1, "days": -2, ...}} with integer fields
    - {"absolute": 3600} seconds, int or float
    """
    errors: list[str] = []

    if not isinstance(data, dict):
        return [f"expected an object, got {data!r}"]

    kinds = [k for k in ("calendar", "absolute") if k in data]
    if len(kinds) != 1:
        return ["expected exactly one of 'calendar' or 'absolute'"]

    if kinds[0] == "absolute":
        value = data["absolute"]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"absolute: expected seconds, got {value!r}")
        return errors

    fields = data["calendar"]
    if not isinstance(fields, dict) or not fields:
        return [f"calendar: expected a non-empty object, got {fields!r}"]

    for name, value in fields.items():
        if name not in CALENDAR_FIELDS:
            errors.append(
                f"calendar: unknown field '{name}' "
                f"(expected one of {', '.join(CALENDAR_FIELDS)})"
            )
        elif isinstance(value, bool) or not isinstance(value, int):
            errors.append(f"calendar: '{name}' must be an integer, got {value!r}")

    return errors
