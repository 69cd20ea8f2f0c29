"""Getter combinators.

A getter is a pure function ``(instant, zone) -> value``. The combinators
here build parametrized getters; their options are explicit frozen records
rather than trailing positional flags::

    la.extract(i, format("dddd, MMMM Do YYYY"))
    la.extract(i, diff(other, units.day, exact=True))
    la.extract(i, from_(other))            # "3 months ago"

Registry setters/units are getters too: ``la.extract(i, units.hour)``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from twozhakes.algebra.namespace import CombinatorNamespace
from twozhakes.algebra.registry import Unit, as_unit
from twozhakes.domain.instant import Instant, Instantish, as_instant
from twozhakes.domain.names import FieldName

if TYPE_CHECKING:
    from twozhakes.algebra.zone import Getter, ZoneContext
    from twozhakes.infrastructure.calendar import CalendarPattern


@dataclass(frozen=True, slots=True)
class DiffOptions:
    """Signed distance from ``compare_to`` to the extracted instant."""

    compare_to: Instant
    unit: FieldName | None = None
    exact: bool = False


@dataclass(frozen=True, slots=True)
class RelativeOptions:
    """Human-readable distance. ``other=None`` means "now" at call time.

    ``towards`` flips the point of view: ``from`` describes the extracted
    instant relative to ``other``; ``to`` describes ``other`` relative to
    the extracted instant.
    """

    other: Instant | None = None
    no_suffix: bool = False
    towards: bool = False


@dataclass(frozen=True, slots=True)
class CalendarOptions:
    """Calendar text relative to ``reference`` (default: now)."""

    reference: Instant | None = None
    formats: Mapping[str, CalendarPattern] | None = None


def format(pattern: str | None = None) -> Getter[str]:  # noqa: A001
    """Render with a moment-style pattern (default ``YYYY-MM-DDTHH:mm:ssZ``)."""

    def get(instant: Instantish, zone: ZoneContext) -> str:
        return zone.engine.format(as_instant(instant), zone.tz, pattern)

    get.__qualname__ = f"format({pattern!r})"
    return get


def diff(
    other: Instantish | DiffOptions,
    unit: Unit | str | None = None,
    *,
    exact: bool = False,
) -> Getter[int | float]:
    """Distance from *other* to the extracted instant, in *unit*
    (milliseconds when omitted). Truncated toward zero unless *exact*."""
    if isinstance(other, DiffOptions):
        options = other
    else:
        options = DiffOptions(
            compare_to=as_instant(other),
            unit=as_unit(unit).name if unit is not None else None,
            exact=exact,
        )

    def get(instant: Instantish, zone: ZoneContext) -> int | float:
        return zone.engine.diff(
            as_instant(instant),
            options.compare_to,
            zone.tz,
            options.unit,
            exact=options.exact,
        )

    get.__qualname__ = f"diff({options!r})"
    return get


def relative(options: RelativeOptions) -> Getter[str]:
    """Getter for an explicit :class:`RelativeOptions`."""

    def get(instant: Instantish, zone: ZoneContext) -> str:
        this = as_instant(instant)
        other = options.other if options.other is not None else Instant.now()
        if options.towards:
            this, other = other, this
        return zone.engine.relative_time(this, other, zone.tz, no_suffix=options.no_suffix)

    get.__qualname__ = f"relative({options!r})"
    return get


def from_(other: Instantish, *, no_suffix: bool = False) -> Getter[str]:
    """The extracted instant relative to *other*: ``"3 months ago"``."""
    return relative(RelativeOptions(other=as_instant(other), no_suffix=no_suffix))


def to(other: Instantish, *, no_suffix: bool = False) -> Getter[str]:
    """*other* relative to the extracted instant: ``"in 3 months"``."""
    return relative(RelativeOptions(other=as_instant(other), no_suffix=no_suffix, towards=True))


def from_now(*, no_suffix: bool = False) -> Getter[str]:
    return relative(RelativeOptions(no_suffix=no_suffix))


def to_now(*, no_suffix: bool = False) -> Getter[str]:
    return relative(RelativeOptions(no_suffix=no_suffix, towards=True))


def calendar(
    reference: Instantish | None = None,
    *,
    formats: Mapping[str, CalendarPattern] | None = None,
) -> Getter[str]:
    """"Today at 9:00 AM", "Last Monday at 2:30 PM", "03/01/2020", ...

    *formats* overrides patterns by key (``sameDay``, ``nextDay``,
    ``nextWeek``, ``lastDay``, ``lastWeek``, ``sameElse``); a value may be a
    callable taking the reference instant and returning a pattern.
    """
    options = CalendarOptions(
        reference=as_instant(reference) if reference is not None else None,
        formats=dict(formats) if formats else None,
    )

    def get(instant: Instantish, zone: ZoneContext) -> str:
        ref = options.reference if options.reference is not None else Instant.now()
        return zone.engine.calendar_text(as_instant(instant), ref, zone.tz, options.formats)

    get.__qualname__ = "calendar"
    return get


def weeks_in_year() -> Getter[int]:
    """Weeks in the instant's year under the locale week rules."""

    def get(instant: Instantish, zone: ZoneContext) -> int:
        return zone.engine.weeks_in_year(as_instant(instant), zone.tz)

    return get


def iso_weeks_in_year() -> Getter[int]:
    def get(instant: Instantish, zone: ZoneContext) -> int:
        return zone.engine.iso_weeks_in_year(as_instant(instant), zone.tz)

    return get


def days_in_month() -> Getter[int]:
    def get(instant: Instantish, zone: ZoneContext) -> int:
        return zone.engine.days_in_month(as_instant(instant), zone.tz)

    return get


getters = CombinatorNamespace(
    "getter",
    {
        "format": format,
        "diff": diff,
        "relative": relative,
        "from_": from_,
        "from": from_,
        "to": to,
        "from_now": from_now,
        "to_now": to_now,
        "calendar": calendar,
        "weeks_in_year": weeks_in_year,
        "iso_weeks_in_year": iso_weeks_in_year,
        "days_in_month": days_in_month,
        "fromNow": from_now,
        "toNow": to_now,
        "weeksInYear": weeks_in_year,
        "isoWeeksInYear": iso_weeks_in_year,
        "daysInMonth": days_in_month,
    },
)
