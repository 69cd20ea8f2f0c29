"""Tests for moment-style pattern formatting."""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from twozhakes.infrastructure.formatting import (
    expand_long_formats,
    format_local,
    ordinal,
    zero_fill,
)
from twozhakes.infrastructure.weeks import ISO_WEEK

NY = ZoneInfo("America/New_York")
LA = ZoneInfo("America/Los_Angeles")


@pytest.fixture
def sunday_morning() -> datetime:
    return datetime(2020, 3, 1, 9, 0, 0, tzinfo=NY)


class TestHelpers:
    @pytest.mark.parametrize(
        ("n", "text"),
        [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
         (13, "13th"), (21, "21st"), (22, "22nd"), (111, "111th")],
    )  # fmt: skip
    def test_ordinal(self, n: int, text: str) -> None:
        assert ordinal(n) == text

    def test_zero_fill(self) -> None:
        assert zero_fill(7, 3) == "007"
        assert zero_fill(-7, 2) == "-07"
        assert zero_fill(2020, 6, force_sign=True) == "+002020"

    def test_expand_long_formats(self) -> None:
        assert expand_long_formats("LT") == "h:mm A"
        assert expand_long_formats("[LT] L") == "[LT] MM/DD/YYYY"


class TestFormatLocal:
    def test_long_english_date(self, sunday_morning: datetime) -> None:
        text = format_local(sunday_morning, "dddd, MMMM Do YYYY, h:mm:ss a")
        assert text == "Sunday, March 1st 2020, 9:00:00 am"

    def test_numeric_tokens(self) -> None:
        d = datetime(2020, 3, 7, 5, 4, 3, 21000, tzinfo=LA)
        assert format_local(d, "YYYY-MM-DD hh:mm") == "2020-03-07 05:04"
        assert format_local(d, "YYYY-MM-DDTHH:mm:ss.SSSZ") == "2020-03-07T05:04:03.021-08:00"
        assert format_local(d, "ZZ") == "-0800"
        assert format_local(d, "S SS SSSS") == "0 02 0210"

    def test_sub_minute_offset(self) -> None:
        lmt = datetime(1880, 1, 1, 4, 7, 2, tzinfo=LA)
        assert format_local(lmt, "Z") == "-07:52"
        assert format_local(lmt, "ZZ") == "-0752"

    def test_calendar_tokens(self) -> None:
        d = datetime(2020, 3, 7, 17, 0, tzinfo=LA)
        assert format_local(d, "Q Qo DDD DDDD") == "1 1st 67 067"
        assert format_local(d, "d do dd ddd") == "6 6th Sa Sat"
        assert format_local(d, "h A k") == "5 PM 17"

    def test_week_tokens_follow_rules(self) -> None:
        d = datetime(2021, 1, 1, tzinfo=NY)
        assert format_local(d, "w gggg") == "1 2021"
        assert format_local(d, "w gggg", ISO_WEEK) == "53 2020"
        assert format_local(d, "W GGGG E") == "53 2020 5"

    def test_year_tokens(self) -> None:
        d = datetime(2020, 11, 8, tzinfo=NY)
        assert format_local(d, "yyyy-MM-DD") == "2020-11-08"
        assert format_local(d, "YY") == "20"

    def test_midnight_k_is_24(self) -> None:
        assert format_local(datetime(2020, 1, 1, tzinfo=NY), "k kk") == "24 24"

    def test_literals_and_escapes(self, sunday_morning: datetime) -> None:
        assert format_local(sunday_morning, "[Today at] LT") == "Today at 9:00 AM"
        assert format_local(sunday_morning, r"\Y YYYY") == "Y 2020"

    def test_long_date_formats(self, sunday_morning: datetime) -> None:
        assert format_local(sunday_morning, "L") == "03/01/2020"
        assert format_local(sunday_morning, "LLLL") == "Sunday, March 1, 2020 9:00 AM"
        assert format_local(sunday_morning, "ll") == "Mar 1, 2020"

    def test_zone_abbreviation_and_epoch(self, sunday_morning: datetime) -> None:
        assert format_local(sunday_morning, "z") == "EST"
        assert format_local(sunday_morning, "X") == "1583071200"
