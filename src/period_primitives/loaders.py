"""Data loading utilities for periods, durations and fixtures."""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from pathlib import Path

from dateutil.relativedelta import relativedelta

from period_primitives.duration import Duration
from period_primitives.period import Period
from period_primitives.schema import validate_duration, validate_period


def _raise_if_errors(errors: list[str], where: str) -> None:
    if errors:
        raise ValueError(
            f"Validation errors in {where}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def period_from_dict(data: dict) -> Period:
    """Build a Period from ``{"start": iso, "end": iso}``.

    Raises ValueError if validation fails.
    """
    _raise_if_errors(validate_period(data), "period")
    return Period(
        datetime.fromisoformat(data["start"]),
        datetime.fromisoformat(data["end"]),
    )


def period_to_dict(period: Period) -> dict[str, str]:
    """The JSON-friendly form of a period, inverse of period_from_dict."""
    return {"start": period.start.isoformat(), "end": period.end.isoformat()}


def duration_from_dict(data: dict) -> Duration:
    """Build a Duration from its dict form.

    ``{"calendar": {"months": 1}}`` gives a relativedelta,
    ``{"absolute": 3600}`` gives a timedelta of that many seconds.

    Raises ValueError if validation fails.
    """
    _raise_if_errors(validate_duration(data), "duration")
    if "absolute" in data:
        return timedelta(seconds=data["absolute"])
    return relativedelta(**data["calendar"])


def load_periods_json(path: str | Path) -> dict[str, Period]:
    """Load named periods from a JSON file.

    The JSON file must have the format:
    {
        "periods": {
            "q1": {"start": "2024-01-01T00:00:00", "end": "2024-04-01T00:00:00"},
            ...
        }
    }

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    periods: dict[str, Period] = {}
    errors: list[str] = []
    if not isinstance(data, dict) or "periods" not in data:
        errors.append("missing 'periods'")
    elif not isinstance(data["periods"], dict):
        errors.append("'periods' must be an object of named periods")
    _raise_if_errors(errors, path.name)

    for name, raw in data["periods"].items():
        problems = validate_period(raw)
        if problems:
            errors.extend(f"{name}: {p}" for p in problems)
            continue
        periods[name] = period_from_dict(raw)

    _raise_if_errors(errors, path.name)
    return periods
