#!/usr/bin/env python
"""Visual verification report for period-primitives.

Run:  uv run python scripts/verify.py

Produces a formatted report showing:
  1. Reference data (reference day, time zone, DST dates)
  2. Predicates over the scenario pairs  -- truth table + ASCII timeline
  3. Combinators (merge, intersect, gap, diff)  -- input/output tables
  4. Decomposition (split, split_backwards)  -- chunk tables + ASCII timeline
"""

from __future__ import annotations

import json
import sys
from datetime import date, datetime, time
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from period_primitives.debug import show_periods
from period_primitives.loaders import duration_from_dict
from period_primitives.period import Period
from period_primitives.types import NoOverlapError


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")
REFERENCE_DAY = date.fromisoformat(_ref["day"])

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _at(label: str) -> datetime:
    if len(label) == 5:
        return datetime.combine(REFERENCE_DAY, time.fromisoformat(label))
    return datetime.fromisoformat(label)


def _span(pair: list[str]) -> Period:
    return Period(_at(pair[0]), _at(pair[1]))


def _fmt(p: Period) -> str:
    """Short form: HH:MM-HH:MM on the reference day, ISO otherwise."""
    if p.start.date() == p.end.date() == REFERENCE_DAY:
        return f"{p.start:%H:%M}-{p.end:%H:%M}"
    return str(p)


def _mark(ok: bool) -> str:
    return "PASS" if ok else "FAIL"


# ---------------------------------------------------------------------------
# Section 1: Reference Data
# ---------------------------------------------------------------------------
def section_reference():
    banner("REFERENCE DATA")
    print(f"\n    Reference day:  {REFERENCE_DAY.strftime('%A %Y-%m-%d')}")
    print(f"    Time zone:      {_ref['timezone']}")
    print(f"    Spring forward: {_ref['dst']['spring_forward']}")
    print(f"    Fall back:      {_ref['dst']['fall_back']}")
    print("\n    'HH:MM' labels in scenarios are times on the reference day.")


# ---------------------------------------------------------------------------
# Section 2: Predicates
# ---------------------------------------------------------------------------
def section_predicates():
    banner("PREDICATES")
    data = _load(SCENARIOS / "predicates.json")
    failures = 0

    heading("Pairs: abuts / overlaps / before / after / contains")
    rows = []
    for s in data["pairs"]:
        a, b = _span(s["first"]), _span(s["second"])
        got = [a.abuts(b), a.overlaps(b), a.is_before(b), a.is_after(b), a.contains(b)]
        want = [s["abuts"], s["overlaps"], s["before"], s["after"], s["contains"]]
        ok = got == want
        failures += not ok
        rows.append(
            [s["id"], _fmt(a), _fmt(b)]
            + ["T" if g else "." for g in got]
            + [_mark(ok)]
        )
    table(["Scenario", "A", "B", "abut", "ovl", "bef", "aft", "cont", "Result"], rows)

    heading("Timeline")
    window = _span(["09:00", "17:00"])
    periods, labels = [], []
    for s in data["pairs"][:4]:
        periods += [_span(s["first"]), _span(s["second"])]
        labels += [f"{s['id']}.A", f"{s['id']}.B"]
    print()
    show_periods(periods, window, width=48, labels=labels)
    return failures


# ---------------------------------------------------------------------------
# Section 3: Combinators
# ---------------------------------------------------------------------------
def section_combinators():
    banner("COMBINATORS")
    data = _load(SCENARIOS / "combinators.json")
    failures = 0

    heading("merge(A, B, ...) -> Period")
    rows = []
    for s in data["merge"]:
        periods = [_span(p) for p in s["periods"]]
        result = periods[0].merge(*periods[1:])
        ok = result == _span(s["expected"])
        failures += not ok
        rows.append([s["id"], ", ".join(_fmt(p) for p in periods), _fmt(result), _mark(ok)])
    table(["Scenario", "Inputs", "Result", "Check"], rows)

    heading("intersect(A, B) -> Period | NoOverlapError")
    rows = []
    for s in data["intersect"]:
        a, b = _span(s["first"]), _span(s["second"])
        result = a.intersect(b)
        ok = result == _span(s["expected"])
        failures += not ok
        rows.append([s["id"], _fmt(a), _fmt(b), _fmt(result), _mark(ok)])
    for s in data["intersect_no_overlap"]:
        a, b = _span(s["first"]), _span(s["second"])
        try:
            a.intersect(b)
            outcome, ok = "(no error)", False
        except NoOverlapError:
            outcome, ok = "NoOverlapError", True
        failures += not ok
        rows.append([s["id"], _fmt(a), _fmt(b), outcome, _mark(ok)])
    table(["Scenario", "A", "B", "Result", "Check"], rows)

    heading("gap(A, B) -> Period")
    rows = []
    for s in data["gap"]:
        a, b = _span(s["first"]), _span(s["second"])
        result = a.gap(b)
        ok = result == _span(s["expected"])
        failures += not ok
        rows.append([s["id"], _fmt(a), _fmt(b), _fmt(result), _mark(ok)])
    table(["Scenario", "A", "B", "Gap", "Check"], rows)

    heading("diff(A, B) -> tuple[Period, ...]")
    rows = []
    for s in data["diff"]:
        a, b = _span(s["first"]), _span(s["second"])
        result = a.diff(b)
        ok = result == tuple(_span(p) for p in s["expected"])
        failures += not ok
        pieces = ", ".join(_fmt(p) for p in result) or "(none)"
        rows.append([s["id"], _fmt(a), _fmt(b), pieces, _mark(ok)])
    table(["Scenario", "A", "B", "Pieces", "Check"], rows)
    return failures


# ---------------------------------------------------------------------------
# Section 4: Decomposition
# ---------------------------------------------------------------------------
def section_decompose():
    banner("DECOMPOSITION")
    data = _load(SCENARIOS / "decompose.json")
    failures = 0

    for key in ("split", "split_backwards"):
        heading(f"{key}(P, interval) -> SplitSequence")
        rows = []
        for s in data[key]:
            period = _span(s["period"])
            step = duration_from_dict(s["interval"])
            chunks = list(getattr(period, key)(step))
            ok = chunks == [_span(p) for p in s["expected"]]
            failures += not ok
            rows.append([
                s["id"], _fmt(period), json.dumps(s["interval"]),
                str(len(chunks)), _mark(ok),
            ])
        table(["Scenario", "Period", "Interval", "Chunks", "Check"], rows)

    heading("Timeline: 10:00-12:30 split by one hour")
    period = _span(["10:00", "12:30"])
    chunks = list(period.split(duration_from_dict({"absolute": 3600})))
    print()
    show_periods([period] + chunks, _span(["10:00", "13:00"]), width=36,
                 labels=["period"] + [f"chunk {i}" for i in range(len(chunks))])
    return failures


def main() -> int:
    section_reference()
    failures = section_predicates()
    failures += section_combinators()
    failures += section_decompose()

    banner("SUMMARY")
    print(f"\n    {failures} failing scenario(s)\n")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
