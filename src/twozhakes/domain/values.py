"""Temporal values: a field name paired with a number."""

from __future__ import annotations

from dataclasses import dataclass

from twozhakes.domain.names import FieldName


@dataclass(frozen=True, slots=True)
class TemporalValue:
    """``hour(3)`` -> ``TemporalValue(FieldName.HOUR, 3)``.

    Equality and hashing are by ``(name, value)``.
    """

    name: FieldName
    value: int | float

    def __neg__(self) -> TemporalValue:
        return TemporalValue(self.name, -self.value)

    def __repr__(self) -> str:
        return f"{self.name.attr}({self.value!r})"
