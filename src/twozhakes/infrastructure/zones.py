"""Time zone lookup and host zone detection."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from twozhakes.domain.errors import InvalidZoneIdentifier

logger = logging.getLogger(__name__)

FALLBACK_ZONE_ID = "UTC"


def load_zone(zone_id: str) -> ZoneInfo:
    """Return the ``ZoneInfo`` for *zone_id*.

    Raises:
        InvalidZoneIdentifier: *zone_id* is empty, malformed, or not in the
            timezone database.
    """
    if not zone_id:
        raise InvalidZoneIdentifier(zone_id)
    try:
        return ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError, IsADirectoryError) as exc:
        raise InvalidZoneIdentifier(zone_id) from exc


def guess_local_zone_id() -> str:
    """Best guess at the host's IANA zone name, ``"UTC"`` when undetectable."""
    try:
        name = tzlocal.get_localzone_name()
    except (ZoneInfoNotFoundError, LookupError, ValueError):
        logger.warning("Could not detect local time zone; using %s", FALLBACK_ZONE_ID)
        return FALLBACK_ZONE_ID
    if not name:
        logger.debug("tzlocal returned no zone name; using %s", FALLBACK_ZONE_ID)
        return FALLBACK_ZONE_ID
    try:
        load_zone(name)
    except InvalidZoneIdentifier:
        logger.warning(
            "Local time zone %r is not in the zone database; using %s", name, FALLBACK_ZONE_ID
        )
        return FALLBACK_ZONE_ID
    return name
