"""Pattern formatting with moment-style tokens (English locale).

``YYYY-MM-DD`` -> ``2020-03-07``; ``dddd, MMMM Do YYYY, h:mm:ss a`` ->
``Sunday, March 1st 2020, 9:00:00 am``. Text inside ``[...]`` and any
character preceded by a backslash is copied verbatim. The long-date tokens
(``LT``, ``LTS``, ``L`` .. ``LLLL``, ``l`` .. ``llll``) expand to the
locale's patterns before tokenizing.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timedelta

from twozhakes.domain.instant import Instant
from twozhakes.infrastructure.weeks import (
    WeekRules,
    local_weekday,
    sunday_weekday,
    week_of_year,
)

DEFAULT_FORMAT = "YYYY-MM-DDTHH:mm:ssZ"

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip
MONTHS_SHORT = tuple(m[:3] for m in MONTHS)
WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
WEEKDAYS_SHORT = tuple(w[:3] for w in WEEKDAYS)
WEEKDAYS_MIN = tuple(w[:2] for w in WEEKDAYS)

LONG_DATE_FORMATS: dict[str, str] = {
    "LT": "h:mm A",
    "LTS": "h:mm:ss A",
    "L": "MM/DD/YYYY",
    "LL": "MMMM D, YYYY",
    "LLL": "MMMM D, YYYY h:mm A",
    "LLLL": "dddd, MMMM D, YYYY h:mm A",
    "l": "M/D/YYYY",
    "ll": "MMM D, YYYY",
    "lll": "MMM D, YYYY h:mm A",
    "llll": "ddd, MMM D, YYYY h:mm A",
}

_LONG_TOKENS = re.compile(r"(\[[^\[]*\])|(\\)?(LTS|LT|LL?L?L?|l{1,4})")
_TOKENS = re.compile(
    r"(\[[^\[]*\])|(\\)?"
    r"([Hh]mm(ss)?|Mo|MM?M?M?|Do|DDDo|DD?D?D?|ddd?d?|do?|w[o|w]?|W[o|W]?|Qo?|N{1,5}"
    r"|YYYYYY|YYYYY|YYYY|YY|y{2,4}|yo?|gg(ggg?)?|GG(GGG?)?|e|E|a|A|hh?|HH?|kk?|mm?|ss?"
    r"|S{1,9}|x|X|zz?|ZZ?|.)",
    re.S,
)

TokenFormatter = Callable[[datetime, WeekRules], str]


def ordinal(number: int) -> str:
    """``1`` -> ``1st``, ``12`` -> ``12th``, ``22`` -> ``22nd``."""
    if (number % 100) // 10 == 1:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def zero_fill(number: int, width: int, *, force_sign: bool = False) -> str:
    sign = "-" if number < 0 else ("+" if force_sign else "")
    return sign + str(abs(number)).zfill(width)


def _offset(d: datetime, separator: str) -> str:
    offset = d.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    # Sub-minute offsets (LMT) drop their seconds: -7:52:58 is "-07:52".
    hours, minutes = divmod(abs(offset) // timedelta(minutes=1), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _epoch_ms(d: datetime) -> int:
    return Instant.from_datetime(d).epoch_ms


def _h12(d: datetime) -> int:
    return d.hour % 12 or 12


def _fraction(width: int) -> TokenFormatter:
    def render(d: datetime, _rules: WeekRules) -> str:
        ms = d.microsecond // 1000
        if width < 3:
            return zero_fill(ms // 10 ** (3 - width), width)
        return zero_fill(ms * 10 ** (width - 3), width)

    return render


def _iso_week(d: datetime) -> int:
    return d.isocalendar().week


def _iso_week_year(d: datetime) -> int:
    return d.isocalendar().year


_FORMATTERS: dict[str, TokenFormatter] = {
    # month
    "M": lambda d, r: str(d.month),
    "Mo": lambda d, r: ordinal(d.month),
    "MM": lambda d, r: zero_fill(d.month, 2),
    "MMM": lambda d, r: MONTHS_SHORT[d.month - 1],
    "MMMM": lambda d, r: MONTHS[d.month - 1],
    # quarter
    "Q": lambda d, r: str((d.month - 1) // 3 + 1),
    "Qo": lambda d, r: ordinal((d.month - 1) // 3 + 1),
    # day of month / year
    "D": lambda d, r: str(d.day),
    "Do": lambda d, r: ordinal(d.day),
    "DD": lambda d, r: zero_fill(d.day, 2),
    "DDD": lambda d, r: str(d.timetuple().tm_yday),
    "DDDo": lambda d, r: ordinal(d.timetuple().tm_yday),
    "DDDD": lambda d, r: zero_fill(d.timetuple().tm_yday, 3),
    # day of week
    "d": lambda d, r: str(sunday_weekday(d)),
    "do": lambda d, r: ordinal(sunday_weekday(d)),
    "dd": lambda d, r: WEEKDAYS_MIN[sunday_weekday(d)],
    "ddd": lambda d, r: WEEKDAYS_SHORT[sunday_weekday(d)],
    "dddd": lambda d, r: WEEKDAYS[sunday_weekday(d)],
    "e": lambda d, r: str(local_weekday(d, r)),
    "E": lambda d, r: str(d.isoweekday()),
    # week of year
    "w": lambda d, r: str(week_of_year(d, r)[0]),
    "wo": lambda d, r: ordinal(week_of_year(d, r)[0]),
    "ww": lambda d, r: zero_fill(week_of_year(d, r)[0], 2),
    "W": lambda d, r: str(_iso_week(d)),
    "Wo": lambda d, r: ordinal(_iso_week(d)),
    "WW": lambda d, r: zero_fill(_iso_week(d), 2),
    # year
    "Y": lambda d, r: str(d.year),
    "YY": lambda d, r: zero_fill(d.year % 100, 2),
    "YYYY": lambda d, r: zero_fill(d.year, 4),
    "YYYYY": lambda d, r: zero_fill(d.year, 5),
    "YYYYYY": lambda d, r: zero_fill(d.year, 6, force_sign=True),
    "y": lambda d, r: str(d.year),
    "yo": lambda d, r: ordinal(d.year),
    "yy": lambda d, r: zero_fill(d.year, 2),
    "yyy": lambda d, r: zero_fill(d.year, 3),
    "yyyy": lambda d, r: zero_fill(d.year, 4),
    "gg": lambda d, r: zero_fill(week_of_year(d, r)[1] % 100, 2),
    "gggg": lambda d, r: zero_fill(week_of_year(d, r)[1], 4),
    "ggggg": lambda d, r: zero_fill(week_of_year(d, r)[1], 5),
    "GG": lambda d, r: zero_fill(_iso_week_year(d) % 100, 2),
    "GGGG": lambda d, r: zero_fill(_iso_week_year(d), 4),
    "GGGGG": lambda d, r: zero_fill(_iso_week_year(d), 5),
    # era
    "N": lambda d, r: "AD",
    "NN": lambda d, r: "AD",
    "NNN": lambda d, r: "AD",
    "NNNN": lambda d, r: "Anno Domini",
    "NNNNN": lambda d, r: "AD",
    # time of day
    "a": lambda d, r: "am" if d.hour < 12 else "pm",
    "A": lambda d, r: "AM" if d.hour < 12 else "PM",
    "H": lambda d, r: str(d.hour),
    "HH": lambda d, r: zero_fill(d.hour, 2),
    "h": lambda d, r: str(_h12(d)),
    "hh": lambda d, r: zero_fill(_h12(d), 2),
    "k": lambda d, r: str(d.hour or 24),
    "kk": lambda d, r: zero_fill(d.hour or 24, 2),
    "m": lambda d, r: str(d.minute),
    "mm": lambda d, r: zero_fill(d.minute, 2),
    "s": lambda d, r: str(d.second),
    "ss": lambda d, r: zero_fill(d.second, 2),
    "hmm": lambda d, r: f"{_h12(d)}{d.minute:02d}",
    "hmmss": lambda d, r: f"{_h12(d)}{d.minute:02d}{d.second:02d}",
    "Hmm": lambda d, r: f"{d.hour}{d.minute:02d}",
    "Hmmss": lambda d, r: f"{d.hour}{d.minute:02d}{d.second:02d}",
    # zone and epoch
    "z": lambda d, r: d.tzname() or "",
    "zz": lambda d, r: d.tzname() or "",
    "Z": lambda d, r: _offset(d, ":"),
    "ZZ": lambda d, r: _offset(d, ""),
    "x": lambda d, r: str(_epoch_ms(d)),
    "X": lambda d, r: str(_epoch_ms(d) // 1000),
}
_FORMATTERS.update({"S" * n: _fraction(n) for n in range(1, 10)})


def _replace_long(match: re.Match[str]) -> str:
    if match.group(1) or match.group(2):
        return match.group(0)
    return LONG_DATE_FORMATS[match.group(3)]


def expand_long_formats(pattern: str) -> str:
    """Replace ``LT``/``LL``/... with their patterns, leaving escapes alone."""
    for _ in range(5):
        expanded = _LONG_TOKENS.sub(_replace_long, pattern)
        if expanded == pattern:
            break
        pattern = expanded
    return pattern


def format_local(d: datetime, pattern: str, rules: WeekRules | None = None) -> str:
    """Render the aware local datetime *d* with a moment-style *pattern*."""
    rules = rules or WeekRules()
    out: list[str] = []
    for match in _TOKENS.finditer(expand_long_formats(pattern)):
        literal, escaped, token = match.group(1), match.group(2), match.group(3)
        if literal:
            out.append(literal[1:-1])
            continue
        formatter = None if escaped else _FORMATTERS.get(token)
        out.append(formatter(d, rules) if formatter else token)
    return "".join(out)
