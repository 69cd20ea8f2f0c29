"""Tests for zone contexts and the context factory."""

from __future__ import annotations

import pytest

from twozhakes.algebra.context import get_zone
from twozhakes.algebra.operators import add, set, start_of, subtract
from twozhakes.algebra.registry import setters, units
from twozhakes.algebra.zone import ZoneContext, ZoneContextFactory
from twozhakes.domain.errors import InvalidZoneIdentifier, UnparsableTemporal
from twozhakes.domain.instant import Instant
from twozhakes.infrastructure.calendar import CalendarEngine


class TestZoneContext:
    def test_read_only(self, la: ZoneContext) -> None:
        with pytest.raises(AttributeError):
            la.zone_id = "UTC"  # type: ignore[misc]

    def test_repr(self, la: ZoneContext) -> None:
        assert repr(la) == "ZoneContext('America/Los_Angeles')"

    def test_parse(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.parse("2020-03-07T13:00:00Z") == test_date
        assert la.parse("2020-03-07 05:00") == test_date

    def test_parse_error(self, la: ZoneContext) -> None:
        with pytest.raises(UnparsableTemporal):
            la.parse("whenever")

    def test_extract_with_setters(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.extract(test_date, units.hour) == 5
        assert la.extract(test_date, units.day) == 6
        assert la.extract(test_date, setters.date) == 7

    def test_extract_with_plain_getter(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.extract(test_date, lambda i, zone: zone.zone_id) == "America/Los_Angeles"

    def test_extract_accepts_epoch_ms(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.extract(test_date.epoch_ms, units.hour) == 5

    def test_operate_pinned_scenarios(self, la: ZoneContext, test_date: Instant) -> None:
        assert la.operate(test_date, add(units.hour(24))).isoformat() == (
            "2020-03-08T13:00:00.000Z"
        )
        assert la.operate(test_date, add(units.day(1))).isoformat() == "2020-03-08T12:00:00.000Z"
        result = la.operate(test_date, subtract(units.day(1)), set(units.hour(3)))
        assert result.isoformat() == "2020-03-06T11:00:00.000Z"

    def test_operate_without_operators_is_identity(
        self, la: ZoneContext, test_date: Instant
    ) -> None:
        assert la.operate(test_date) == test_date

    def test_operate_does_not_change_input(self, la: ZoneContext, test_date: Instant) -> None:
        before = test_date.epoch_ms
        la.operate(test_date, add(units.year(1)), start_of(units.month))
        assert test_date.epoch_ms == before


class TestZoneContextFactory:
    def test_memoizes_by_zone_id(self) -> None:
        factory = ZoneContextFactory(CalendarEngine())
        assert factory.get("Asia/Tokyo") is factory.get("Asia/Tokyo")
        assert "Asia/Tokyo" in factory
        assert len(factory) == 1

    def test_unknown_zone_is_not_cached(self) -> None:
        factory = ZoneContextFactory(CalendarEngine())
        with pytest.raises(InvalidZoneIdentifier):
            factory.get("Mars/Olympus")
        assert "Mars/Olympus" not in factory
        assert len(factory) == 0

    def test_get_zone_shares_contexts(self) -> None:
        assert get_zone("Europe/Paris") is get_zone("Europe/Paris")
