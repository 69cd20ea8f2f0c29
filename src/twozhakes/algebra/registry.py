"""Name registry — units and setters over the closed field vocabulary.

Every registry entry is two things at once:

* a constructor: ``units.hour(3)`` -> ``TemporalValue(hour, 3)``;
* a field reader: ``units.hour.getter(instant, zone)`` -> ``5``.

The reader is what lets a setter stand in wherever a getter is expected
(see :meth:`twozhakes.algebra.zone.ZoneContext.extract`).

INVARIANT: there is exactly one entry object per field name for the life
of the process. ``resolve_unit("days") is units.day``.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from twozhakes.domain.errors import UnknownTemporalName
from twozhakes.domain.instant import as_instant
from twozhakes.domain.names import FieldName, lookup_field
from twozhakes.domain.values import TemporalValue

if TYPE_CHECKING:
    from twozhakes.algebra.zone import ZoneContext
    from twozhakes.domain.instant import Instantish


class Setter:
    """A settable calendar field."""

    __slots__ = ("name",)

    name: FieldName

    def __init__(self, name: FieldName) -> None:
        object.__setattr__(self, "name", name)

    def __setattr__(self, key: str, value: object) -> None:
        msg = f"{type(self).__name__} is read-only"
        raise AttributeError(msg)

    def __call__(self, value: int | float) -> TemporalValue:
        return TemporalValue(self.name, value)

    def getter(self, instant: Instantish, zone: ZoneContext) -> int:
        """Read this field of *instant* as seen in *zone*."""
        return zone.engine.get_field(as_instant(instant), zone.tz, self.name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__.lower()} {self.name.value}>"

    def __reduce__(self) -> tuple[object, tuple[str]]:
        return (resolve_setter, (self.name.value,))


class Unit(Setter):
    """A field that is also a duration for add/subtract."""

    __slots__ = ()

    def __reduce__(self) -> tuple[object, tuple[str]]:
        return (resolve_unit, (self.name.value,))


class FieldNamespace(Mapping[str, Setter]):
    """Read-only view of registry entries.

    Supports ``ns.day_of_year``, ``ns["dayOfYear"]``, iteration and ``len``.
    """

    def __init__(self, entries: Mapping[FieldName, Setter]) -> None:
        self._by_value = {name.value: entry for name, entry in entries.items()}
        self._by_attr = {name.attr: entry for name, entry in entries.items()}

    def __getattr__(self, attr: str) -> Setter:
        try:
            return self.__dict__["_by_attr"][attr]
        except KeyError:
            raise AttributeError(attr) from None

    def __getitem__(self, key: str) -> Setter:
        if key in self._by_value:
            return self._by_value[key]
        return self._by_attr[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_value)

    def __len__(self) -> int:
        return len(self._by_value)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._by_attr})

    def __repr__(self) -> str:
        return f"FieldNamespace({', '.join(self._by_value)})"


class NameRegistry:
    """Constructed-once table of the sixteen field entries.

    Resolution results are memoized per raw input string; the cache is
    append-only and guarded by a lock so concurrent first lookups agree.
    """

    def __init__(self) -> None:
        self._entries: dict[FieldName, Setter] = {
            name: (Unit(name) if name.is_unit else Setter(name)) for name in FieldName
        }
        self._unit_cache: dict[str, Unit] = {}
        self._setter_cache: dict[str, Setter] = {}
        self._lock = threading.Lock()
        self.units = FieldNamespace(
            {name: entry for name, entry in self._entries.items() if isinstance(entry, Unit)}
        )
        self.setters = FieldNamespace(self._entries)

    def entry(self, name: FieldName) -> Setter:
        return self._entries[name]

    def resolve_unit(self, name: str) -> Unit:
        """Plural-insensitive lookup of a unit; setter-only names are rejected.

        Raises:
            UnknownTemporalName: *name* is not a unit of time.
        """
        cached = self._unit_cache.get(name)
        if cached is not None:
            return cached
        field = lookup_field(name) if isinstance(name, str) else None
        entry = self._entries.get(field) if field is not None else None
        if not isinstance(entry, Unit):
            raise UnknownTemporalName(str(name), "unit of time")
        with self._lock:
            return self._unit_cache.setdefault(name, entry)

    def resolve_setter(self, name: str) -> Setter:
        """Plural-insensitive lookup of any settable field, units included.

        Raises:
            UnknownTemporalName: *name* is not a settable field.
        """
        cached = self._setter_cache.get(name)
        if cached is not None:
            return cached
        field = lookup_field(name) if isinstance(name, str) else None
        if field is None:
            raise UnknownTemporalName(str(name), "settable field")
        with self._lock:
            return self._setter_cache.setdefault(name, self._entries[field])


REGISTRY = NameRegistry()

units = REGISTRY.units
setters = REGISTRY.setters


def resolve_unit(name: str) -> Unit:
    return REGISTRY.resolve_unit(name)


def resolve_setter(name: str) -> Setter:
    return REGISTRY.resolve_setter(name)


def as_unit(unit: Unit | str) -> Unit:
    """Accept a registry unit or its (possibly plural) name."""
    if isinstance(unit, Unit):
        return unit
    if isinstance(unit, str):
        return resolve_unit(unit)
    msg = f"Expected a unit or unit name, got {type(unit).__name__}"
    raise TypeError(msg)
