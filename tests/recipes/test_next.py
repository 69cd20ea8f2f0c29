"""Tests for the next-weekday and next-month recipes."""

from __future__ import annotations

import pytest

from twozhakes.algebra.getters import format
from twozhakes.algebra.zone import ZoneContext
from twozhakes.recipes import next_day_of_week, next_month, start_of_next

THURSDAY = 4
APRIL = 3


def day_of(zone: ZoneContext, text: str, *operators) -> str:
    return zone.extract(zone.operate(zone.parse(text), *operators), format("YYYY-MM-DD"))


class TestNextDayOfWeek:
    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            ("2020-03-30", "2020-04-02"),  # Monday
            ("2020-04-03", "2020-04-09"),  # Friday
            ("2020-04-02", "2020-04-09"),  # Thursday itself
        ],
    )
    def test_next_thursday(self, utc: ZoneContext, start: str, expected: str) -> None:
        assert day_of(utc, start, next_day_of_week(THURSDAY)) == expected

    def test_inclusive_answers_today(self, utc: ZoneContext) -> None:
        assert day_of(utc, "2020-04-02", next_day_of_week(THURSDAY, inclusive=True)) == (
            "2020-04-02"
        )

    def test_result_is_start_of_day(self, la: ZoneContext) -> None:
        result = la.operate(la.parse("2020-03-30 17:45"), next_day_of_week(THURSDAY))
        assert la.extract(result, format("YYYY-MM-DD HH:mm")) == "2020-04-02 00:00"


class TestNextMonth:
    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            ("2020-03-30", "2020-04-01"),
            ("2020-05-01", "2021-04-01"),
            ("2020-04-02", "2021-04-01"),
        ],
    )
    def test_next_april(self, utc: ZoneContext, start: str, expected: str) -> None:
        assert day_of(utc, start, next_month(APRIL)) == expected

    def test_inclusive_answers_this_month(self, utc: ZoneContext) -> None:
        assert day_of(utc, "2020-04-02", next_month(APRIL, inclusive=True)) == "2020-04-01"


class TestStartOfNext:
    def test_start_of_next_year(self, utc: ZoneContext) -> None:
        assert day_of(utc, "2020-07-04", start_of_next("years")) == "2021-01-01"

    def test_start_of_next_week(self, utc: ZoneContext) -> None:
        assert day_of(utc, "2020-04-02", start_of_next("week")) == "2020-04-05"
