"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, twozhakes.toml only contains
overrides. An empty file (or none at all) gives English week rules and
moment's relative-time thresholds.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    local: str | None = None


class WeekConfig(BaseModel):
    """[week] section.

    ``dow``: first day of the week (0 = Sunday).
    ``doy``: ``7 + dow - doy`` is the January day always in week 1.
    """

    model_config = {"frozen": True}

    dow: int = Field(default=0, ge=0, le=6)
    doy: int = Field(default=6, ge=0, le=12)

    @model_validator(mode="after")
    def _check_span(self) -> Self:
        if not 0 <= self.doy - self.dow <= 6:
            msg = f"doy must be within 6 days after dow (dow={self.dow}, doy={self.doy})"
            raise ValueError(msg)
        return self


class RelativeTimeConfig(BaseModel):
    """[relative_time] section — humanize thresholds."""

    model_config = {"frozen": True}

    ss: int = 44
    s: int = 45
    m: int = 45
    h: int = 22
    d: int = 26
    M: int = 11  # noqa: N815


class CalendarConfig(BaseModel):
    """[calendar] section — patterns for calendar text."""

    model_config = {"frozen": True}

    same_day: str = "[Today at] LT"
    next_day: str = "[Tomorrow at] LT"
    next_week: str = "dddd [at] LT"
    last_day: str = "[Yesterday at] LT"
    last_week: str = "[Last] dddd [at] LT"
    same_else: str = "L"

    def as_formats(self) -> dict[str, str]:
        """Keys as the calendar getter names them (``sameDay``, ...)."""
        return {
            "sameDay": self.same_day,
            "nextDay": self.next_day,
            "nextWeek": self.next_week,
            "lastDay": self.last_day,
            "lastWeek": self.last_week,
            "sameElse": self.same_else,
        }
