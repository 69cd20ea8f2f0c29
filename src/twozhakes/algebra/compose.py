"""Composition engine — fold operators left to right over an instant.

Each stage receives the previous stage's result re-coerced through
:func:`as_instant`, so stages only ever see immutable Instants and a stage
returning something that is not instant-like fails right there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from twozhakes.domain.instant import Instant, Instantish, as_instant

if TYPE_CHECKING:
    from twozhakes.algebra.zone import Operator, ZoneContext


def compose_ops(*operators: Operator) -> Operator:
    """Return one operator applying *operators* in order.

    ``compose_ops()`` is the identity. The composed operator is itself a
    valid stage for another pipeline.
    """
    stages = tuple(operators)
    for stage in stages:
        if not callable(stage):
            msg = f"Operators must be callable, got {type(stage).__name__}"
            raise TypeError(msg)

    def composed(instant: Instantish, zone: ZoneContext) -> Instant:
        current = as_instant(instant)
        for stage in stages:
            current = as_instant(stage(current, zone))
        return current

    return composed


def identity(instant: Instantish, zone: ZoneContext) -> Instant:
    """The no-op operator."""
    return as_instant(instant)
