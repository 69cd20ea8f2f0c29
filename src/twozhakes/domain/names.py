"""The closed vocabulary of calendar field names.

Nine names are units: usable as a duration in add/subtract and as a
settable field. Seven more are setter-only fields. Every unit is also a
setter; no setter-only name is a unit.

Lookup is case-sensitive and plural-insensitive: exactly one trailing
``s`` is stripped before matching.
"""

from __future__ import annotations

import re
from enum import StrEnum


class FieldName(StrEnum):
    """Canonical names of the sixteen calendar fields."""

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    DATE = "date"
    DAY_OF_YEAR = "dayOfYear"
    ISO_WEEK = "isoWeek"
    ISO_WEEK_YEAR = "isoWeekYear"
    ISO_WEEKDAY = "isoWeekday"
    WEEK_YEAR = "weekYear"
    WEEKDAY = "weekday"

    @property
    def attr(self) -> str:
        """Python attribute spelling (``dayOfYear`` -> ``day_of_year``)."""
        return snake_case(self.value)

    @property
    def is_unit(self) -> bool:
        return self in UNIT_NAMES


UNIT_NAMES: frozenset[FieldName] = frozenset(
    {
        FieldName.MILLISECOND,
        FieldName.SECOND,
        FieldName.MINUTE,
        FieldName.HOUR,
        FieldName.DAY,
        FieldName.WEEK,
        FieldName.MONTH,
        FieldName.QUARTER,
        FieldName.YEAR,
    }
)

SETTER_ONLY_NAMES: frozenset[FieldName] = frozenset(set(FieldName) - UNIT_NAMES)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_case(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def normalize_name(name: str) -> str:
    """Strip a single trailing ``s``: ``"days"`` -> ``"day"``, ``"day"`` unchanged."""
    return name[:-1] if name.endswith("s") else name


# Accepted spellings after normalization: canonical camelCase and snake_case.
FIELD_ALIASES: dict[str, FieldName] = {
    **{f.value: f for f in FieldName},
    **{f.attr: f for f in FieldName},
}


def lookup_field(name: str) -> FieldName | None:
    """Return the field for *name* after plural-stripping, or None."""
    return FIELD_ALIASES.get(normalize_name(name))
