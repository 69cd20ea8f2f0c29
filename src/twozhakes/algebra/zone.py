"""Zone contexts — a read-only handle bound to one time zone.

A context owns no mutable state: every operation threads a fresh
:class:`Instant` through, so contexts are shared freely between callers.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from twozhakes.algebra.compose import compose_ops
from twozhakes.domain.instant import Instant, Instantish, as_instant
from twozhakes.infrastructure.zones import load_zone

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from twozhakes.infrastructure.calendar import CalendarEngine

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Operator = Callable[[Instant, "ZoneContext"], Instantish]
Getter = Callable[[Instant, "ZoneContext"], T]


@runtime_checkable
class FieldExtractor(Protocol[T_co]):
    """Anything carrying its own field reader (every registry setter/unit)."""

    def getter(self, instant: Instantish, zone: ZoneContext) -> T_co: ...


class ZoneContext:
    """Parse, read and transform instants as seen in one zone.

    Build through :class:`ZoneContextFactory` (or :func:`twozhakes.get_zone`)
    so each zone id maps to one shared context.
    """

    __slots__ = ("zone_id", "tz", "engine")

    zone_id: str
    tz: ZoneInfo
    engine: CalendarEngine

    def __init__(self, zone_id: str, engine: CalendarEngine) -> None:
        object.__setattr__(self, "zone_id", zone_id)
        object.__setattr__(self, "tz", load_zone(zone_id))
        object.__setattr__(self, "engine", engine)

    def __setattr__(self, key: str, value: object) -> None:
        msg = "ZoneContext is read-only"
        raise AttributeError(msg)

    def __repr__(self) -> str:
        return f"ZoneContext({self.zone_id!r})"

    def parse(self, text: str) -> Instant:
        """Parse *text*; text without an offset is read as wall time here.

        Raises:
            UnparsableTemporal: the text is not a recognizable date/time.
        """
        return self.engine.parse(text, self.tz)

    def extract(self, instant: Instantish, extractor: FieldExtractor[T] | Getter[T]) -> T:
        """Read a value: a registry setter/unit reads its field, any other
        callable is treated as a getter ``(instant, zone) -> value``."""
        i = as_instant(instant)
        if isinstance(extractor, FieldExtractor):
            return extractor.getter(i, self)
        return extractor(i, self)

    def operate(self, instant: Instantish, *operators: Operator) -> Instant:
        """Apply *operators* left to right; the input is never modified."""
        return compose_ops(*operators)(as_instant(instant), self)


class ZoneContextFactory:
    """Append-only, lock-guarded map of zone id to :class:`ZoneContext`.

    Unknown zone ids raise :class:`InvalidZoneIdentifier` and are not cached.
    """

    def __init__(self, engine: CalendarEngine) -> None:
        self.engine = engine
        self._contexts: dict[str, ZoneContext] = {}
        self._lock = threading.Lock()

    def get(self, zone_id: str) -> ZoneContext:
        ctx = self._contexts.get(zone_id)
        if ctx is not None:
            return ctx
        with self._lock:
            ctx = self._contexts.get(zone_id)
            if ctx is None:
                ctx = ZoneContext(zone_id, self.engine)
                self._contexts[zone_id] = ctx
                logger.debug("Created zone context for %s", zone_id)
            return ctx

    def __contains__(self, zone_id: Any) -> bool:
        return zone_id in self._contexts

    def __len__(self) -> int:
        return len(self._contexts)
