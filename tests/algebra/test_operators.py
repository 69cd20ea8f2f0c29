"""Tests for operator combinators."""

from __future__ import annotations

import pytest

from twozhakes.algebra.getters import format
from twozhakes.algebra.operators import add, end_of, operators, set, start_of, subtract
from twozhakes.algebra.registry import setters, units
from twozhakes.algebra.zone import Operator, ZoneContext
from twozhakes.domain.errors import TemporalOutOfRange, UnknownTemporalName
from twozhakes.domain.instant import Instant

STAMP = "YYYY-MM-DD HH:mm:ss.SSS"


class TestAddSubtract:
    def test_add_then_subtract_round_trips_fixed_units(
        self, la: ZoneContext, test_date: Instant
    ) -> None:
        assert la.operate(test_date, add(units.minute(90)), subtract(units.minute(90))) == (
            test_date
        )

    def test_rejects_setter_only_values(self) -> None:
        with pytest.raises(UnknownTemporalName):
            add(setters.date(1))
        with pytest.raises(UnknownTemporalName):
            subtract(setters.iso_week(1))

    def test_rejects_non_values(self) -> None:
        with pytest.raises(TypeError, match="temporal value"):
            add(5)  # type: ignore[arg-type]

    def test_operator_accepts_epoch_ms(self, la: ZoneContext, test_date: Instant) -> None:
        assert add(units.second(1))(test_date.epoch_ms, la) == test_date.plus_ms(1000)


class TestSet:
    def test_set_accepts_setter_only_fields(self, la: ZoneContext, test_date: Instant) -> None:
        result = la.operate(test_date, set(setters.day_of_year(1)))
        assert la.extract(result, format("YYYY-MM-DD")) == "2020-01-01"

    def test_out_of_range_rolls_over(self, utc: ZoneContext) -> None:
        april = utc.parse("2020-04-10")
        assert utc.operate(april, set(setters.date(31))).isoformat() == (
            "2020-05-01T00:00:00.000Z"
        )

    def test_rejects_non_values(self) -> None:
        with pytest.raises(TypeError):
            set(units.hour)  # type: ignore[arg-type]


class TestNoOps:
    @pytest.mark.parametrize(
        "operator",
        [add(units.day(0)), add(units.month(0)), set(setters.date(1)), set(units.hour(1))],
    )
    def test_no_op_in_repeated_hour(self, la: ZoneContext, operator: Operator) -> None:
        # 01:30 PST, after clocks fell back from 01:59 PDT
        second_pass = la.parse("2020-11-01T09:30:00Z")
        assert la.operate(second_pass, operator) == second_pass

    def test_out_of_range_result(self, utc: ZoneContext) -> None:
        with pytest.raises(TemporalOutOfRange):
            utc.operate(utc.parse("9999-12-01"), add(units.year(1)))


class TestStartEnd:
    def test_start_of_accepts_names(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.operate(test_date, start_of("months")) == la.operate(
            test_date, start_of(units.month)
        )

    def test_start_of_iso_week(self, la: ZoneContext, test_date: Instant) -> None:
        result = la.operate(test_date, start_of(setters.iso_week))
        assert la.extract(result, format(STAMP)) == "2020-03-02 00:00:00.000"
        assert la.operate(test_date, start_of("isoWeek")) == result

    def test_end_of_date(self, la: ZoneContext, test_date: Instant) -> None:
        result = la.operate(test_date, end_of(setters.date))
        assert la.extract(result, format(STAMP)) == "2020-03-07 23:59:59.999"

    def test_start_of_rejects_other_setters(self) -> None:
        with pytest.raises(UnknownTemporalName):
            start_of(setters.day_of_year)
        with pytest.raises(UnknownTemporalName, match="unit of time"):
            end_of("fortnight")

    def test_start_of_idempotent(self, la: ZoneContext, test_date: Instant) -> None:
        once = la.operate(test_date, start_of(units.week))
        assert la.operate(once, start_of(units.week)) == once


class TestOperatorNamespace:
    def test_builtins(self) -> None:
        assert operators.add is add
        assert operators["startOf"] is start_of
        assert operators.is_builtin("end_of")

    def test_new_york_pinned_scenario(self, ny: ZoneContext) -> None:
        d = ny.parse("2020-02-05")
        nd = ny.operate(
            d,
            operators.add(units.month(1)),
            operators.startOf(units.month),
            operators.startOf(units.day),
            operators.set(units.hour(9)),
        )
        assert ny.extract(nd, units.year) == 2020
        assert ny.extract(d, units.month) == 1
        assert ny.extract(nd, units.month) == 2
        assert ny.extract(nd, format("dddd, MMMM Do YYYY, h:mm:ss a")) == (
            "Sunday, March 1st 2020, 9:00:00 am"
        )
