"""Tests for the field-name vocabulary."""

from __future__ import annotations

import pytest

from twozhakes.domain.names import (
    SETTER_ONLY_NAMES,
    UNIT_NAMES,
    FieldName,
    lookup_field,
    normalize_name,
    snake_case,
)


class TestFieldName:
    def test_sixteen_fields(self) -> None:
        assert len(FieldName) == 16
        assert len(UNIT_NAMES) == 9
        assert len(SETTER_ONLY_NAMES) == 7

    def test_units_and_setter_only_are_disjoint(self) -> None:
        assert not UNIT_NAMES & SETTER_ONLY_NAMES
        assert UNIT_NAMES | SETTER_ONLY_NAMES == set(FieldName)

    @pytest.mark.parametrize(
        ("name", "attr"),
        [
            (FieldName.DAY_OF_YEAR, "day_of_year"),
            (FieldName.ISO_WEEK_YEAR, "iso_week_year"),
            (FieldName.HOUR, "hour"),
        ],
    )
    def test_attr_is_snake_case(self, name: FieldName, attr: str) -> None:
        assert name.attr == attr

    def test_is_unit(self) -> None:
        assert FieldName.QUARTER.is_unit
        assert not FieldName.DATE.is_unit
        assert not FieldName.WEEKDAY.is_unit

    def test_values_are_strings(self) -> None:
        assert FieldName.DAY_OF_YEAR == "dayOfYear"


class TestLookup:
    def test_normalize_strips_one_s(self) -> None:
        assert normalize_name("days") == "day"
        assert normalize_name("day") == "day"
        assert normalize_name("dayss") == "days"

    def test_snake_case(self) -> None:
        assert snake_case("isoWeekday") == "iso_weekday"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("hour", FieldName.HOUR),
            ("hours", FieldName.HOUR),
            ("isoWeeks", FieldName.ISO_WEEK),
            ("day_of_years", FieldName.DAY_OF_YEAR),
            ("dates", FieldName.DATE),
        ],
    )
    def test_plural_insensitive(self, text: str, expected: FieldName) -> None:
        assert lookup_field(text) is expected

    @pytest.mark.parametrize("text", ["Days", "HOUR", "fortnight", "", "dayss"])
    def test_unknown_or_wrong_case(self, text: str) -> None:
        assert lookup_field(text) is None
