"""Operator combinators.

An operator is a pure function ``(instant, zone) -> instant``. The
combinators here turn temporal values and units into operators::

    la.operate(i, subtract(units.day(1)), set(units.hour(3)))

Out-of-range values passed to :func:`set` are not renormalized; they roll
over exactly as the calendar engine does (``set(setters.date(31))`` in a
30-day month lands on the 1st of the next month).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from twozhakes.algebra.namespace import CombinatorNamespace
from twozhakes.algebra.registry import Setter, Unit, as_unit, resolve_setter
from twozhakes.domain.errors import UnknownTemporalName
from twozhakes.domain.instant import as_instant
from twozhakes.domain.names import FieldName
from twozhakes.domain.values import TemporalValue
from twozhakes.infrastructure.calendar import TRUNCATABLE

if TYPE_CHECKING:
    from twozhakes.algebra.zone import Operator, ZoneContext
    from twozhakes.domain.instant import Instant, Instantish


def _require_value(value: TemporalValue) -> TemporalValue:
    if not isinstance(value, TemporalValue):
        msg = f"Expected a temporal value such as units.day(1), got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _require_unit_value(value: TemporalValue) -> TemporalValue:
    _require_value(value)
    if not value.name.is_unit:
        raise UnknownTemporalName(value.name.value, "unit of time")
    return value


def _truncation_field(unit: Unit | Setter | str) -> FieldName:
    if isinstance(unit, str):
        try:
            unit = resolve_setter(unit)
        except UnknownTemporalName:
            raise UnknownTemporalName(unit, "unit of time") from None
    if isinstance(unit, Setter) and unit.name in TRUNCATABLE:
        return unit.name
    if isinstance(unit, Setter):
        raise UnknownTemporalName(unit.name.value, "unit of time")
    return as_unit(unit).name


def add(value: TemporalValue) -> Operator:
    """Move forward by ``value.value`` of ``value.name``."""
    v = _require_unit_value(value)

    def op(instant: Instantish, zone: ZoneContext) -> Instant:
        return zone.engine.add(as_instant(instant), zone.tz, v.name, v.value)

    op.__qualname__ = f"add({v!r})"
    return op


def subtract(value: TemporalValue) -> Operator:
    """Move backward by ``value.value`` of ``value.name``."""
    v = _require_unit_value(value)

    def op(instant: Instantish, zone: ZoneContext) -> Instant:
        return zone.engine.subtract(as_instant(instant), zone.tz, v.name, v.value)

    op.__qualname__ = f"subtract({v!r})"
    return op


def set(value: TemporalValue) -> Operator:  # noqa: A001
    """Assign ``value.value`` to the field ``value.name``."""
    v = _require_value(value)

    def op(instant: Instantish, zone: ZoneContext) -> Instant:
        return zone.engine.set_field(as_instant(instant), zone.tz, v.name, v.value)

    op.__qualname__ = f"set({v!r})"
    return op


def start_of(unit: Unit | Setter | str) -> Operator:
    """Truncate to the start of *unit* (``isoWeek`` and ``date`` also accepted)."""
    name = _truncation_field(unit)

    def op(instant: Instantish, zone: ZoneContext) -> Instant:
        return zone.engine.start_of(as_instant(instant), zone.tz, name)

    op.__qualname__ = f"start_of({name.value})"
    return op


def end_of(unit: Unit | Setter | str) -> Operator:
    """Move to the last millisecond of *unit*."""
    name = _truncation_field(unit)

    def op(instant: Instantish, zone: ZoneContext) -> Instant:
        return zone.engine.end_of(as_instant(instant), zone.tz, name)

    op.__qualname__ = f"end_of({name.value})"
    return op


operators = CombinatorNamespace(
    "operator",
    {
        "add": add,
        "subtract": subtract,
        "set": set,
        "start_of": start_of,
        "end_of": end_of,
        "startOf": start_of,
        "endOf": end_of,
    },
)
