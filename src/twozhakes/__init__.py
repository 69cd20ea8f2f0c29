"""twozhakes — a composable algebra for timezone-aware instants.

Typical use::

    from twozhakes import get_zone, operators, units

    la = get_zone("America/Los_Angeles")
    i = la.parse("2020-03-07T13:00:00Z")
    la.operate(i, operators.add(units.day(1)), operators.set(units.hour(9)))
"""

from __future__ import annotations

__version__ = "0.1.0"

from twozhakes.algebra.compose import compose_ops
from twozhakes.algebra.context import DEFAULT_ALGEBRA, SYSTEM, UTC, Algebra, get_zone
from twozhakes.algebra.getters import getters
from twozhakes.algebra.operators import operators
from twozhakes.algebra.registry import (
    Setter,
    Unit,
    resolve_setter,
    resolve_unit,
    setters,
    units,
)
from twozhakes.algebra.zone import ZoneContext
from twozhakes.domain.errors import (
    InvalidZoneIdentifier,
    TemporalOutOfRange,
    TwozhakesError,
    UnknownTemporalName,
    UnparsableTemporal,
)
from twozhakes.domain.instant import Instant, as_instant
from twozhakes.domain.values import TemporalValue

__all__ = [
    "DEFAULT_ALGEBRA",
    "SYSTEM",
    "UTC",
    "Algebra",
    "Instant",
    "InvalidZoneIdentifier",
    "Setter",
    "TemporalOutOfRange",
    "TemporalValue",
    "TwozhakesError",
    "Unit",
    "UnknownTemporalName",
    "UnparsableTemporal",
    "ZoneContext",
    "__version__",
    "as_instant",
    "compose_ops",
    "get_zone",
    "getters",
    "operators",
    "resolve_setter",
    "resolve_unit",
    "setters",
    "units",
]
