"""Instant — an opaque, zone-independent point in time.

INVARIANT: Instants are immutable values. Every transformation produces a
new Instant; nothing in twozhakes mutates one in place.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


@dataclass(frozen=True, order=True, slots=True)
class Instant:
    """Milliseconds since the Unix epoch."""

    epoch_ms: int

    def __post_init__(self) -> None:
        if isinstance(self.epoch_ms, bool) or not isinstance(self.epoch_ms, int):
            msg = f"epoch_ms must be an int, got {type(self.epoch_ms).__name__}"
            raise TypeError(msg)

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int) -> Instant:
        return cls(int(epoch_ms))

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Convert an aware datetime. Naive datetimes are ambiguous and rejected."""
        if dt.tzinfo is None or dt.utcoffset() is None:
            msg = f"Cannot convert naive datetime {dt.isoformat()} to an Instant"
            raise ValueError(msg)
        return cls((dt - EPOCH) // _ONE_MS)

    @classmethod
    def now(cls) -> Instant:
        return cls(time.time_ns() // 1_000_000)

    def to_datetime(self, tz: tzinfo = UTC) -> datetime:
        return (EPOCH + timedelta(milliseconds=self.epoch_ms)).astimezone(tz)

    def plus_ms(self, delta: int) -> Instant:
        return Instant(self.epoch_ms + int(delta))

    def isoformat(self) -> str:
        """``2020-03-08T13:00:00.000Z``."""
        dt = self.to_datetime()
        return (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}.{dt.microsecond // 1000:03d}Z"
        )

    def __str__(self) -> str:
        return self.isoformat()

    def __repr__(self) -> str:
        return f"Instant({self.isoformat()})"


Instantish = Instant | int | datetime


def as_instant(value: Instantish) -> Instant:
    """Coerce the instant-like values accepted at public boundaries."""
    if isinstance(value, Instant):
        return value
    if isinstance(value, datetime):
        return Instant.from_datetime(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return Instant(value)
    msg = f"Expected an Instant, epoch milliseconds or aware datetime, got {type(value).__name__}"
    raise TypeError(msg)
