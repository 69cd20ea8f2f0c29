"""CalendarEngine — field access and calendar arithmetic in a zone.

All wall-clock work happens on naive local datetimes which are converted
back to instants keeping the source instant's ``fold``. Local times that do
not exist (DST gaps) always resolve forward by the gap; freshly parsed
ambiguous local times resolve to the earlier instant, and an instant already
in the repeated hour stays there when only other fields change.

Conventions (moment-compatible):
- ``month`` is 0-based, ``day`` is the day of week (Sunday = 0) and
  ``date`` is the day of month.
- millisecond through hour are fixed durations when added; day and week
  move the wall clock; month, quarter and year move the calendar and clamp
  the day of month.
- Setting a field past its range rolls into the neighbouring period.
- Results outside years 1 to 9999 raise ``TemporalOutOfRange``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from twozhakes.domain.errors import (
    TemporalOutOfRange,
    TwozhakesError,
    UnknownTemporalName,
    UnparsableTemporal,
)
from twozhakes.domain.instant import Instant
from twozhakes.domain.names import FieldName
from twozhakes.infrastructure import relative
from twozhakes.infrastructure.formatting import DEFAULT_FORMAT, format_local
from twozhakes.infrastructure.weeks import (
    ISO_WEEK,
    WeekRules,
    date_from_weeks,
    days_in_month,
    local_weekday,
    sunday_weekday,
    week_of_year,
    weeks_in_year,
)

logger = logging.getLogger(__name__)

F = FieldName

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR

FIXED_DURATIONS: dict[FieldName, int] = {
    F.MILLISECOND: 1,
    F.SECOND: MS_PER_SECOND,
    F.MINUTE: MS_PER_MINUTE,
    F.HOUR: MS_PER_HOUR,
}

# Units whose length depends on the calendar, expressed in days or months.
_DAY_STEPS: dict[FieldName, int] = {F.DAY: 1, F.WEEK: 7}
_MONTH_STEPS: dict[FieldName, int] = {F.MONTH: 1, F.QUARTER: 3, F.YEAR: 12}

TRUNCATABLE: frozenset[FieldName] = frozenset(
    {*FIXED_DURATIONS, *_DAY_STEPS, *_MONTH_STEPS, F.DATE, F.ISO_WEEK}
)

CalendarPattern = str | Callable[[Instant], str]


def abs_round(value: float) -> int:
    """Round half away from zero."""
    rounded = math.floor(abs(value) + 0.5)
    return -rounded if value < 0 else rounded


def to_int(value: float) -> int:
    """Truncate toward zero."""
    return int(value)


@contextmanager
def _in_range() -> Iterator[None]:
    """Report datetime overflow as :class:`TemporalOutOfRange`."""
    try:
        yield
    except TwozhakesError:
        raise
    except (ValueError, OverflowError) as exc:
        raise TemporalOutOfRange(str(exc)) from exc


def _midnight(wall: datetime) -> datetime:
    return wall.replace(hour=0, minute=0, second=0, microsecond=0)


class CalendarEngine:
    """Calendar and timezone computations over :class:`Instant` values.

    The engine is stateless apart from its configuration, so one instance
    is shared by every zone context built from it.
    """

    def __init__(
        self,
        week: WeekRules | None = None,
        thresholds: relative.RelativeThresholds | None = None,
        calendar_formats: Mapping[str, str] | None = None,
    ) -> None:
        self.week = week or WeekRules()
        self.thresholds = thresholds or relative.RelativeThresholds()
        self.calendar_formats: dict[str, str] = {
            **relative.DEFAULT_CALENDAR_FORMATS,
            **(calendar_formats or {}),
        }

    def __repr__(self) -> str:
        return f"CalendarEngine(week={self.week!r})"

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    @staticmethod
    def local(instant: Instant, tz: ZoneInfo) -> datetime:
        """Aware wall-clock datetime of *instant* in *tz*."""
        with _in_range():
            return instant.to_datetime(tz)

    @staticmethod
    def from_wall(wall: datetime, tz: ZoneInfo, fold: int = 0) -> Instant:
        """Instant of naive *wall* time in *tz*.

        *fold* picks the later of two ambiguous instants; inside a DST gap
        it is ignored so the time still moves forward.
        """
        aware = wall.replace(tzinfo=tz, fold=fold)
        if fold and aware.utcoffset() > aware.replace(fold=0).utcoffset():
            aware = aware.replace(fold=0)
        return Instant.from_datetime(aware)

    @staticmethod
    def offset_ms(instant: Instant, tz: ZoneInfo) -> int:
        with _in_range():
            offset = instant.to_datetime(tz).utcoffset() or timedelta(0)
        return offset // timedelta(milliseconds=1)

    # ------------------------------------------------------------------
    # Parsing and formatting
    # ------------------------------------------------------------------

    def parse(self, text: str, tz: ZoneInfo) -> Instant:
        """Parse *text*; text without an offset is wall time in *tz*.

        ISO 8601 is tried first, then dateutil's lenient parser.

        Raises:
            UnparsableTemporal: neither parser understands *text*.
        """
        stripped = text.strip() if isinstance(text, str) else ""
        if not stripped:
            raise UnparsableTemporal(str(text), tz.key)
        try:
            parsed = dateutil_parser.isoparse(stripped)
        except ValueError:
            try:
                parsed = dateutil_parser.parse(stripped)
            except (ValueError, OverflowError) as exc:
                raise UnparsableTemporal(text, tz.key) from exc
            logger.debug("Parsed %r with the lenient parser", text)
        if parsed.tzinfo is None:
            return self.from_wall(parsed, tz)
        return Instant.from_datetime(parsed)

    def format(self, instant: Instant, tz: ZoneInfo, pattern: str | None = None) -> str:
        return format_local(self.local(instant, tz), pattern or DEFAULT_FORMAT, self.week)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def get_field(self, instant: Instant, tz: ZoneInfo, name: FieldName) -> int:
        d = self.local(instant, tz)
        if name is F.MILLISECOND:
            return d.microsecond // 1000
        if name is F.SECOND:
            return d.second
        if name is F.MINUTE:
            return d.minute
        if name is F.HOUR:
            return d.hour
        if name is F.DAY:
            return sunday_weekday(d)
        if name is F.DATE:
            return d.day
        if name is F.MONTH:
            return d.month - 1
        if name is F.QUARTER:
            return (d.month - 1) // 3 + 1
        if name is F.YEAR:
            return d.year
        if name is F.DAY_OF_YEAR:
            return d.timetuple().tm_yday
        if name is F.WEEK:
            return week_of_year(d, self.week)[0]
        if name is F.WEEK_YEAR:
            return week_of_year(d, self.week)[1]
        if name is F.ISO_WEEK:
            return d.isocalendar().week
        if name is F.ISO_WEEK_YEAR:
            return d.isocalendar().year
        if name is F.ISO_WEEKDAY:
            return d.isoweekday()
        if name is F.WEEKDAY:
            return local_weekday(d, self.week)
        raise UnknownTemporalName(str(name), "calendar field")

    def set_field(self, instant: Instant, tz: ZoneInfo, name: FieldName, value: float) -> Instant:
        """Assign *value* to field *name*; out-of-range values roll over."""
        d = self.local(instant, tz)
        with _in_range():
            wall = self._set_wall(d.replace(tzinfo=None), name, to_int(value))
            return self.from_wall(wall, tz, d.fold)

    def _set_wall(self, wall: datetime, name: FieldName, n: int) -> datetime:
        if name is F.MILLISECOND:
            return wall.replace(microsecond=0) + timedelta(milliseconds=n)
        if name is F.SECOND:
            return wall.replace(second=0) + timedelta(seconds=n)
        if name is F.MINUTE:
            return wall.replace(minute=0) + timedelta(minutes=n)
        if name is F.HOUR:
            return wall.replace(hour=0) + timedelta(hours=n)
        if name is F.DATE:
            return wall.replace(day=1) + timedelta(days=n - 1)
        if name is F.DAY:
            return wall + timedelta(days=n - sunday_weekday(wall))
        if name is F.WEEKDAY:
            return wall + timedelta(days=n - local_weekday(wall, self.week))
        if name is F.ISO_WEEKDAY:
            current = sunday_weekday(wall)
            target = n if current else n - 7
            return wall + timedelta(days=target - current)
        if name is F.DAY_OF_YEAR:
            return wall + timedelta(days=n - wall.timetuple().tm_yday)
        if name is F.WEEK:
            return wall + timedelta(weeks=n - week_of_year(wall, self.week)[0])
        if name is F.ISO_WEEK:
            return wall + timedelta(weeks=n - wall.isocalendar().week)
        if name is F.MONTH:
            return wall + relativedelta(month=1, months=n)
        if name is F.QUARTER:
            return wall + relativedelta(month=1, months=(n - 1) * 3 + (wall.month - 1) % 3)
        if name is F.YEAR:
            # relativedelta reads year=0 as "unchanged"
            if not datetime.min.year <= n <= datetime.max.year:
                raise TemporalOutOfRange(f"year {n}")
            return wall + relativedelta(year=n)
        if name is F.WEEK_YEAR:
            return self._set_week_year(wall, n, week_of_year(wall, self.week)[0], self.week)
        if name is F.ISO_WEEK_YEAR:
            return self._set_week_year(wall, n, wall.isocalendar().week, ISO_WEEK)
        raise UnknownTemporalName(str(name), "calendar field")

    @staticmethod
    def _set_week_year(wall: datetime, week_year: int, week: int, rules: WeekRules) -> datetime:
        week = min(week, weeks_in_year(week_year, rules))
        target = date_from_weeks(week_year, week, sunday_weekday(wall), rules)
        return wall.replace(year=target.year, month=target.month, day=target.day)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, instant: Instant, tz: ZoneInfo, unit: FieldName, amount: float) -> Instant:
        if unit in FIXED_DURATIONS:
            return instant.plus_ms(round(amount * FIXED_DURATIONS[unit]))
        d = self.local(instant, tz)
        wall = d.replace(tzinfo=None)
        with _in_range():
            if unit in _DAY_STEPS:
                wall += timedelta(days=abs_round(amount * _DAY_STEPS[unit]))
            elif unit in _MONTH_STEPS:
                wall += relativedelta(months=abs_round(amount * _MONTH_STEPS[unit]))
            else:
                raise UnknownTemporalName(str(unit), "unit of time")
            return self.from_wall(wall, tz, d.fold)

    def subtract(self, instant: Instant, tz: ZoneInfo, unit: FieldName, amount: float) -> Instant:
        return self.add(instant, tz, unit, -amount)

    def start_of(self, instant: Instant, tz: ZoneInfo, unit: FieldName) -> Instant:
        if unit is F.MILLISECOND:
            return instant
        if unit in FIXED_DURATIONS:
            local_ms = instant.epoch_ms + self.offset_ms(instant, tz)
            return instant.plus_ms(-(local_ms % FIXED_DURATIONS[unit]))
        wall = self.local(instant, tz).replace(tzinfo=None)
        return self.from_wall(self._truncate_wall(wall, unit), tz)

    def end_of(self, instant: Instant, tz: ZoneInfo, unit: FieldName) -> Instant:
        if unit is F.MILLISECOND:
            return instant
        if unit in FIXED_DURATIONS:
            return self.start_of(instant, tz, unit).plus_ms(FIXED_DURATIONS[unit] - 1)
        wall = self._truncate_wall(self.local(instant, tz).replace(tzinfo=None), unit)
        with _in_range():
            if unit in (F.WEEK, F.ISO_WEEK):
                following = wall + timedelta(days=7)
            elif unit in _MONTH_STEPS:
                following = wall + relativedelta(months=_MONTH_STEPS[unit])
            else:
                following = wall + timedelta(days=1)
            return self.from_wall(following, tz).plus_ms(-1)

    def _truncate_wall(self, wall: datetime, unit: FieldName) -> datetime:
        midnight = _midnight(wall)
        if unit in (F.DAY, F.DATE):
            return midnight
        if unit is F.WEEK:
            return midnight - timedelta(days=local_weekday(wall, self.week))
        if unit is F.ISO_WEEK:
            return midnight - timedelta(days=wall.isoweekday() - 1)
        if unit is F.MONTH:
            return midnight.replace(day=1)
        if unit is F.QUARTER:
            return midnight.replace(month=(wall.month - 1) // 3 * 3 + 1, day=1)
        if unit is F.YEAR:
            return midnight.replace(month=1, day=1)
        raise UnknownTemporalName(str(unit), "unit of time")

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def diff(
        self,
        instant: Instant,
        other: Instant,
        tz: ZoneInfo,
        unit: FieldName | None = None,
        *,
        exact: bool = False,
    ) -> int | float:
        """Signed distance from *other* to *instant* in *unit*.

        Day and week differences discount the change in UTC offset between
        the two instants, so crossing a DST transition still counts as a
        whole day. Truncated toward zero unless *exact*.
        """
        delta = instant.epoch_ms - other.epoch_ms
        if unit is None or unit is F.MILLISECOND:
            return delta
        if unit in _MONTH_STEPS:
            output = self._month_diff(instant, other, tz) / _MONTH_STEPS[unit]
        elif unit in (F.SECOND, F.MINUTE, F.HOUR):
            output = delta / FIXED_DURATIONS[unit]
        elif unit in _DAY_STEPS:
            zone_delta = self.offset_ms(other, tz) - self.offset_ms(instant, tz)
            output = (delta - zone_delta) / (_DAY_STEPS[unit] * MS_PER_DAY)
        else:
            raise UnknownTemporalName(str(unit), "unit of time")
        if exact:
            return output + 0.0
        return to_int(output)

    def _month_diff(self, a: Instant, b: Instant, tz: ZoneInfo) -> float:
        la, lb = self.local(a, tz), self.local(b, tz)
        if la.day < lb.day:
            return -self._month_diff(b, a, tz)
        whole = (lb.year - la.year) * 12 + (lb.month - la.month)
        anchor = self.add(a, tz, F.MONTH, whole)
        if b.epoch_ms - anchor.epoch_ms < 0:
            anchor2 = self.add(a, tz, F.MONTH, whole - 1)
            adjust = (b.epoch_ms - anchor.epoch_ms) / (anchor.epoch_ms - anchor2.epoch_ms)
        else:
            anchor2 = self.add(a, tz, F.MONTH, whole + 1)
            adjust = (b.epoch_ms - anchor.epoch_ms) / (anchor2.epoch_ms - anchor.epoch_ms)
        return -(whole + adjust) + 0.0

    def days_in_month(self, instant: Instant, tz: ZoneInfo) -> int:
        d = self.local(instant, tz)
        return days_in_month(d.year, d.month)

    def weeks_in_year(self, instant: Instant, tz: ZoneInfo) -> int:
        return weeks_in_year(self.local(instant, tz).year, self.week)

    def iso_weeks_in_year(self, instant: Instant, tz: ZoneInfo) -> int:
        return weeks_in_year(self.local(instant, tz).year, ISO_WEEK)

    # ------------------------------------------------------------------
    # Human-readable text
    # ------------------------------------------------------------------

    def relative_time(
        self,
        instant: Instant,
        other: Instant,
        tz: ZoneInfo,
        *,
        no_suffix: bool = False,
    ) -> str:
        """Describe *instant* relative to *other* ("3 months ago", "in a day")."""
        months, ms = self._calendar_difference(other, instant, tz)
        return relative.humanize(months, ms, with_suffix=not no_suffix, thresholds=self.thresholds)

    def _calendar_difference(self, base: Instant, other: Instant, tz: ZoneInfo) -> tuple[int, int]:
        """Whole months plus leftover milliseconds from *base* to *other*."""
        if base <= other:
            return self._positive_difference(base, other, tz)
        months, ms = self._positive_difference(other, base, tz)
        return -months, -ms

    def _positive_difference(self, base: Instant, other: Instant, tz: ZoneInfo) -> tuple[int, int]:
        lb, lo = self.local(base, tz), self.local(other, tz)
        months = lo.month - lb.month + (lo.year - lb.year) * 12
        anchor = self.add(base, tz, F.MONTH, months)
        if anchor > other:
            months -= 1
            anchor = self.add(base, tz, F.MONTH, months)
        return months, other.epoch_ms - anchor.epoch_ms

    def calendar_text(
        self,
        instant: Instant,
        reference: Instant,
        tz: ZoneInfo,
        formats: Mapping[str, CalendarPattern] | None = None,
    ) -> str:
        """"Today at 9:00 AM", "Last Monday at 2:30 PM", or a plain date."""
        start_of_reference = self.start_of(reference, tz, F.DAY)
        key = relative.calendar_format_key(
            self.diff(instant, start_of_reference, tz, F.DAY, exact=True)
        )
        override = (formats or {}).get(key)
        pattern = override(reference) if callable(override) else override
        return self.format(instant, tz, pattern or self.calendar_formats[key])
