"""Tests for the translator/builder: starting_on through expand.

Test data loaded from: data/fixtures/scenarios/translate.json
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest
from dateutil.relativedelta import relativedelta

from conftest import SPRING_FORWARD, at, interval, load_scenarios, local, span

_data = load_scenarios("translate")


def _argument(spec: dict):
    """The datepoint or duration a scenario passes to its operation."""
    if "point" in spec:
        return at(spec["point"])
    return interval(spec["interval"])


class TestOperations:

    @pytest.mark.parametrize("spec", _data["operations"], ids=lambda s: s["id"])
    def test_function(self, spec):
        """Module-level function returns the expected period."""
        from period_primitives import translate

        period = span(spec["period"])
        result = getattr(translate, spec["op"])(period, _argument(spec))
        assert result == span(spec["expected"])

    @pytest.mark.parametrize("spec", _data["operations"], ids=lambda s: s["id"])
    def test_method(self, spec):
        """Period method agrees with the function and leaves the source alone."""
        period = span(spec["period"])
        result = getattr(period, spec["op"])(_argument(spec))
        assert result == span(spec["expected"])
        assert period == span(spec["period"])

    @pytest.mark.parametrize("spec", _data["invalid_range"], ids=lambda s: s["id"])
    def test_invalid_range(self, spec):
        from period_primitives.types import InvalidRangeError

        period = span(spec["period"])
        with pytest.raises(InvalidRangeError):
            getattr(period, spec["op"])(_argument(spec))
        assert period == span(spec["period"])


class TestIdentities:

    def test_starting_on_own_start(self, morning):
        assert morning.starting_on(morning.start).same_value_as(morning)

    def test_ending_on_own_end(self, morning):
        assert morning.ending_on(morning.end).same_value_as(morning)

    def test_with_own_duration(self, morning):
        assert morning.with_duration(morning.duration) == morning
        assert morning.with_duration(morning.date_interval) == morning

    def test_move_round_trip(self, morning):
        assert morning.move(timedelta(hours=5)).move(timedelta(hours=-5)) == morning

    def test_move_never_fails(self, morning):
        moved = morning.move(relativedelta(years=-100))
        assert moved.duration == morning.duration

    def test_move_through_month_end_clamp(self):
        """Both ends clamp to Feb 28, start keeps 12:00, end keeps 00:00."""
        from period_primitives.period import Period

        period = Period(at("2023-01-29T12:00:00"), at("2023-01-30T00:00:00"))
        moved = period.move(relativedelta(months=1))
        assert moved.start == at("2023-02-28T12:00:00")
        assert moved.end == moved.start
        assert moved.is_empty()

    def test_move_clamp_keeps_order_when_not_crossing(self):
        from period_primitives.period import Period

        period = Period(at("2024-01-30T00:00:00"), at("2024-01-31T12:00:00"))
        moved = period.move(relativedelta(months=1))
        assert moved == span(["2024-02-29T00:00:00", "2024-02-29T12:00:00"])

    def test_expand_then_shrink(self, morning):
        assert morning.expand(timedelta(hours=1)).expand(timedelta(hours=-1)) == morning

    def test_number_is_absolute_seconds(self, morning):
        assert morning.move(3600) == span(["11:00", "13:00"])


class TestDaylightSaving:
    """Calendar and absolute shifts differ across a DST change."""

    def test_move_by_calendar_day_keeps_wall_time(self):
        from period_primitives.period import Period

        saturday_nine = Period(local(date(2024, 3, 30), 9), local(date(2024, 3, 30), 10))
        moved = saturday_nine.move(relativedelta(days=1))
        assert moved.start == local(SPRING_FORWARD, 9)
        assert moved.end == local(SPRING_FORWARD, 10)

    def test_move_by_absolute_day_keeps_elapsed_time(self):
        from period_primitives.period import Period

        saturday_nine = Period(local(date(2024, 3, 30), 9), local(date(2024, 3, 30), 10))
        moved = saturday_nine.move(timedelta(days=1))
        assert moved.start == local(SPRING_FORWARD, 10)
        assert moved.timestamp_interval == 3600

    def test_with_duration_across_gap(self):
        """One elapsed hour from 01:30 lands on 03:30 the night clocks jump."""
        from period_primitives.period import Period

        p = Period(local(SPRING_FORWARD, 1, 30), local(SPRING_FORWARD, 1, 30))
        assert p.with_duration(timedelta(hours=1)).end == local(SPRING_FORWARD, 3, 30)
