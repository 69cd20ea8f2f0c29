"""Week numbering rules.

A week rule is a pair ``(dow, doy)``: ``dow`` is the first day of the week
(0 = Sunday) and ``7 + dow - doy`` is the January day that always falls in
week 1. The English locale uses ``(0, 6)`` (the week containing January 1st
is week 1); ISO 8601 uses ``(1, 4)``.
"""

from __future__ import annotations

import calendar as _calendar
from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True, slots=True)
class WeekRules:
    dow: int = 0
    doy: int = 6

    def __post_init__(self) -> None:
        if not 0 <= self.dow <= 6:
            msg = f"dow must be between 0 and 6, got {self.dow}"
            raise ValueError(msg)
        if not 0 <= self.doy - self.dow <= 6:
            msg = f"doy must be within 6 days after dow, got dow={self.dow} doy={self.doy}"
            raise ValueError(msg)


ISO_WEEK = WeekRules(dow=1, doy=4)


def sunday_weekday(d: date) -> int:
    """Day of week with Sunday = 0."""
    return (d.weekday() + 1) % 7


def days_in_year(year: int) -> int:
    return 366 if _calendar.isleap(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Days in *month* (1-12) of *year*."""
    return _calendar.monthrange(year, month)[1]


def first_week_offset(year: int, rules: WeekRules) -> int:
    fwd = 7 + rules.dow - rules.doy
    anchor = date(year, 1, 1) + timedelta(days=fwd - 1)
    fwdlw = (7 + sunday_weekday(anchor) - rules.dow) % 7
    return -fwdlw + fwd - 1


def weeks_in_year(year: int, rules: WeekRules) -> int:
    offset = first_week_offset(year, rules)
    offset_next = first_week_offset(year + 1, rules)
    return (days_in_year(year) - offset + offset_next) // 7


def local_weekday(d: date, rules: WeekRules) -> int:
    """Day of week counted from ``rules.dow``."""
    return (sunday_weekday(d) + 7 - rules.dow) % 7


def week_of_year(d: date, rules: WeekRules) -> tuple[int, int]:
    """Return ``(week, week_year)`` of *d*."""
    offset = first_week_offset(d.year, rules)
    week = (d.timetuple().tm_yday - offset - 1) // 7 + 1
    if week < 1:
        year = d.year - 1
        return week + weeks_in_year(year, rules), year
    total = weeks_in_year(d.year, rules)
    if week > total:
        return week - total, d.year + 1
    return week, d.year


def date_from_weeks(week_year: int, week: int, weekday: int, rules: WeekRules) -> date:
    """The date in *week* of *week_year* falling on *weekday* (Sunday = 0)."""
    local_day = (7 + weekday - rules.dow) % 7
    day_of_year = 1 + 7 * (week - 1) + local_day + first_week_offset(week_year, rules)
    return date(week_year, 1, 1) + timedelta(days=day_of_year - 1)
