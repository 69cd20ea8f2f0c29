"""Relative-time and calendar text (English locale).

A distance is carried as ``(months, milliseconds)``, both with the same
sign, which keeps month lengths exact until the final rounding.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

MS_PER_DAY = 86_400_000

RELATIVE_TIME: dict[str, str] = {
    "future": "in {}",
    "past": "{} ago",
    "s": "a few seconds",
    "ss": "{} seconds",
    "m": "a minute",
    "mm": "{} minutes",
    "h": "an hour",
    "hh": "{} hours",
    "d": "a day",
    "dd": "{} days",
    "M": "a month",
    "MM": "{} months",
    "y": "a year",
    "yy": "{} years",
}

DEFAULT_CALENDAR_FORMATS: dict[str, str] = {
    "sameDay": "[Today at] LT",
    "nextDay": "[Tomorrow at] LT",
    "nextWeek": "dddd [at] LT",
    "lastDay": "[Yesterday at] LT",
    "lastWeek": "[Last] dddd [at] LT",
    "sameElse": "L",
}


@dataclass(frozen=True, slots=True)
class RelativeThresholds:
    """Cut-offs between "a few seconds", "N minutes", "N hours", ...

    ``ss``: up to this many seconds reads "a few seconds";
    ``s``/``m``/``h``/``d``/``M``: below this many seconds/minutes/hours/
    days/months the distance is spelled in that unit.
    """

    ss: int = 44
    s: int = 45
    m: int = 45
    h: int = 22
    d: int = 26
    M: int = 11  # noqa: N815


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def months_to_days(months: float) -> float:
    # 400 years have 146097 days
    return months * 146097 / 4800


def days_to_months(days: float) -> float:
    return days * 4800 / 146097


def humanize(
    months: int,
    milliseconds: int,
    *,
    with_suffix: bool = True,
    thresholds: RelativeThresholds | None = None,
) -> str:
    """Render a ``(months, milliseconds)`` distance, e.g. ``"3 months ago"``.

    Positive distances are in the future ("in 2 hours"); zero and negative
    ones are in the past.
    """
    t = thresholds or RelativeThresholds()
    abs_months, abs_ms = abs(months), abs(milliseconds)

    whole_days = _round_half_up(months_to_days(abs_months))
    seconds = _round_half_up(whole_days * 86400 + abs_ms / 1000)
    minutes = _round_half_up(whole_days * 1440 + abs_ms / 60_000)
    hours = _round_half_up(whole_days * 24 + abs_ms / 3_600_000)
    days = _round_half_up(whole_days + abs_ms / MS_PER_DAY)
    total_months = abs_months + days_to_months(abs_ms / MS_PER_DAY)
    months_rounded = _round_half_up(total_months)
    years = _round_half_up(total_months / 12)

    if seconds <= t.ss:
        key, count = "s", seconds
    elif seconds < t.s:
        key, count = "ss", seconds
    elif minutes <= 1:
        key, count = "m", 1
    elif minutes < t.m:
        key, count = "mm", minutes
    elif hours <= 1:
        key, count = "h", 1
    elif hours < t.h:
        key, count = "hh", hours
    elif days <= 1:
        key, count = "d", 1
    elif days < t.d:
        key, count = "dd", days
    elif months_rounded <= 1:
        key, count = "M", 1
    elif months_rounded < t.M:
        key, count = "MM", months_rounded
    elif years <= 1:
        key, count = "y", 1
    else:
        key, count = "yy", years

    text = RELATIVE_TIME[key].format(count)
    if not with_suffix:
        return text
    is_future = months > 0 or milliseconds > 0
    return RELATIVE_TIME["future" if is_future else "past"].format(text)


def calendar_format_key(days_from_reference_start: float) -> str:
    """Pick the calendar pattern key from the distance, in days, to the
    start of the reference day."""
    diff = days_from_reference_start
    if diff < -6:
        return "sameElse"
    if diff < -1:
        return "lastWeek"
    if diff < 0:
        return "lastDay"
    if diff < 1:
        return "sameDay"
    if diff < 2:
        return "nextDay"
    if diff < 7:
        return "nextWeek"
    return "sameElse"
