"""Operators that jump forward to the next matching weekday or month."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from twozhakes.algebra.compose import compose_ops, identity
from twozhakes.algebra.operators import add, set, start_of
from twozhakes.algebra.registry import Unit, as_unit, units

if TYPE_CHECKING:
    from twozhakes.algebra.zone import Operator, ZoneContext
    from twozhakes.domain.instant import Instant, Instantish


def start_of_next(unit: Unit | str) -> Operator:
    """Start of the following *unit*: ``start_of(u)`` then ``add(u(1))``."""
    u = as_unit(unit)
    return compose_ops(start_of(u), add(u(1)))


def _next(smaller: Unit, larger: Unit) -> Callable[..., Operator]:
    """Build "next <smaller> value within <larger>" operator factories."""

    def factory(n: int, inclusive: bool = False) -> Operator:
        def op(instant: Instantish, zone: ZoneContext) -> Instant:
            current = zone.extract(instant, smaller)
            stays = current < n or (inclusive and current == n)
            return zone.operate(
                instant,
                identity if stays else start_of_next(larger),
                set(smaller(n)),
                start_of(smaller),
            )

        op.__qualname__ = f"next_{smaller.name.value}({n}, inclusive={inclusive})"
        return op

    return factory


next_day_of_week = _next(units.day, units.week)
next_day_of_week.__doc__ = """Start of the next day whose day-of-week is *n* (0 = Sunday).

With *inclusive*, asking on that very day answers today.
"""

next_month = _next(units.month, units.year)
next_month.__doc__ = """Start of the next month *n* (0 = January).

With *inclusive*, asking during that month answers its first day.
"""
