"""Shared test fixtures and data loading for period-primitives.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference day: Mon 2024-06-03.  Scenario datepoints written as "HH:MM"
are times on that day; anything longer is a full ISO datetime.
"""

from __future__ import annotations

import json
from datetime import date, datetime, time
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
REFERENCE_DAY = date.fromisoformat(_reference["day"])
TZ = ZoneInfo(_reference["timezone"])
SPRING_FORWARD = date.fromisoformat(_reference["dst"]["spring_forward"])
FALL_BACK = date.fromisoformat(_reference["dst"]["fall_back"])


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def at(label: str) -> datetime:
    """Datepoint from a scenario label.

    >>> at("10:00")
    datetime(2024, 6, 3, 10, 0)
    >>> at("2024-01-01T00:00:00")
    datetime(2024, 1, 1, 0, 0)
    """
    if len(label) == 5:
        return datetime.combine(REFERENCE_DAY, time.fromisoformat(label))
    return datetime.fromisoformat(label)


def span(pair: list[str]):
    """Period from a ["start", "end"] label pair."""
    from period_primitives.period import Period

    return Period(at(pair[0]), at(pair[1]))


def interval(spec: dict):
    """Duration from a scenario interval dict."""
    from period_primitives.loaders import duration_from_dict

    return duration_from_dict(spec)


def local(day: date, hour: int, minute: int = 0, fold: int = 0) -> datetime:
    """Aware datetime in the reference time zone."""
    return datetime.combine(day, time(hour, minute, fold=fold), tzinfo=TZ)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def periods_file() -> Path:
    return FIXTURES_DIR / "periods.json"


@pytest.fixture
def morning():
    """10:00-12:00 on the reference day."""
    return span(["10:00", "12:00"])


@pytest.fixture
def instant_period():
    """Zero-duration period at 10:00 on the reference day."""
    return span(["10:00", "10:00"])


@pytest.fixture
def spring_forward_day():
    """The Paris day that is 23 hours long."""
    from period_primitives.period import Period

    return Period(local(SPRING_FORWARD, 0), local(date(2024, 4, 1), 0))


@pytest.fixture
def fall_back_day():
    """The Paris day that is 25 hours long."""
    from period_primitives.period import Period

    return Period(local(FALL_BACK, 0), local(date(2024, 10, 28), 0))
