"""Algebra — the explicit owner of the process-wide caches.

An :class:`Algebra` bundles one calendar engine with one zone-context
factory, so the lifetime and configuration of those caches belong to the
caller. The module-level :data:`DEFAULT_ALGEBRA` uses code defaults
(English week rules) and backs :func:`get_zone`, :data:`UTC` and
:data:`SYSTEM`.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from twozhakes.algebra.registry import REGISTRY, NameRegistry, Setter, Unit
from twozhakes.algebra.zone import ZoneContext, ZoneContextFactory
from twozhakes.infrastructure.calendar import CalendarEngine
from twozhakes.infrastructure.relative import RelativeThresholds
from twozhakes.infrastructure.weeks import WeekRules
from twozhakes.infrastructure.zones import guess_local_zone_id

if TYPE_CHECKING:
    from twozhakes.config.settings import TwozhakesSettings

UTC_ZONE_ID = "UTC"


class Algebra:
    """Zone contexts and name resolution sharing one configuration.

    Attributes:
        engine: The calendar engine every context of this algebra uses.
        registry: Field-name registry (shared, the vocabulary is fixed).
    """

    def __init__(
        self,
        engine: CalendarEngine | None = None,
        *,
        registry: NameRegistry = REGISTRY,
        local_zone_id: str | None = None,
    ) -> None:
        self.engine = engine or CalendarEngine()
        self.registry = registry
        self._zones = ZoneContextFactory(self.engine)
        self._local_zone_id = local_zone_id
        self._local_lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: TwozhakesSettings) -> Algebra:
        """Build an algebra from configured week rules, thresholds and zones."""
        engine = CalendarEngine(
            week=WeekRules(dow=settings.week.dow, doy=settings.week.doy),
            thresholds=RelativeThresholds(**settings.relative_time.model_dump()),
            calendar_formats=settings.calendar.as_formats(),
        )
        return cls(engine, local_zone_id=settings.zones.local)

    def zone(self, zone_id: str) -> ZoneContext:
        """The shared context for *zone_id*.

        Raises:
            InvalidZoneIdentifier: the zone database does not know *zone_id*.
        """
        return self._zones.get(zone_id)

    @property
    def utc(self) -> ZoneContext:
        return self.zone(UTC_ZONE_ID)

    @property
    def local_zone_id(self) -> str:
        """The configured local zone, or the host zone guessed on first use."""
        if self._local_zone_id is None:
            with self._local_lock:
                if self._local_zone_id is None:
                    self._local_zone_id = guess_local_zone_id()
        return self._local_zone_id

    @property
    def local(self) -> ZoneContext:
        return self.zone(self.local_zone_id)

    def resolve_unit(self, name: str) -> Unit:
        return self.registry.resolve_unit(name)

    def resolve_setter(self, name: str) -> Setter:
        return self.registry.resolve_setter(name)


DEFAULT_ALGEBRA = Algebra()


def get_zone(zone_id: str) -> ZoneContext:
    """Memoized zone context from the default algebra."""
    return DEFAULT_ALGEBRA.zone(zone_id)


UTC = DEFAULT_ALGEBRA.utc
SYSTEM = DEFAULT_ALGEBRA.local
