"""Error taxonomy.

Every failure is a caller/input error detected at the boundary and raised
synchronously. Nothing here is retried or recovered from.
"""

from __future__ import annotations


class TwozhakesError(Exception):
    """Base class for all errors raised by twozhakes."""


class UnknownTemporalName(TwozhakesError, ValueError):
    """A unit/setter name outside the closed vocabulary."""

    def __init__(self, name: str, kind: str = "unit of time") -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"{name!r} is not a {kind}")


class UnparsableTemporal(TwozhakesError, ValueError):
    """Text the calendar engine cannot interpret as a date/time."""

    def __init__(self, text: str, zone_id: str) -> None:
        self.text = text
        self.zone_id = zone_id
        super().__init__(f"Cannot parse {text!r} as a date/time in zone {zone_id}")


class InvalidZoneIdentifier(TwozhakesError, LookupError):
    """A zone identifier unknown to the timezone database."""

    def __init__(self, zone_id: str) -> None:
        self.zone_id = zone_id
        super().__init__(f"Unknown time zone: {zone_id!r}")


class TemporalOutOfRange(TwozhakesError, ValueError):
    """A result outside the representable years 1 to 9999."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Date/time out of range: {detail}")
