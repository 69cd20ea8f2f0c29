"""Command group: jump to the next weekday or month."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from twozhakes.algebra.getters import format as format_getter
from twozhakes.commands._base import TzGroup
from twozhakes.commands._context import NOW, reported_errors
from twozhakes.recipes import next_day_of_week, next_month

if TYPE_CHECKING:
    from twozhakes.algebra.zone import Operator
    from twozhakes.commands._context import AppContext

DISPLAY_FORMAT = "dddd, MMMM Do YYYY"

_NEXT_EXAMPLES = """\
  twozhakes next weekday 4
  twozhakes next weekday 4 --inclusive --from 2020-04-02
  twozhakes next month 3 --from 2020-03-30
  twozhakes --json next month 0"""


@click.group("next", cls=TzGroup, examples=_NEXT_EXAMPLES)
def next_cmd() -> None:
    """Find the start of the next matching weekday or month."""


def _emit_next(app: AppContext, origin: str, op: Operator, label: str) -> None:
    start = app.parse_instant(origin)
    zone = app.zone
    with reported_errors():
        result = zone.operate(start, op)
        display = zone.extract(result, format_getter(DISPLAY_FORMAT))
    app.emit(
        {
            "zone": zone.zone_id,
            "from": start.isoformat(),
            "target": label,
            "instant": result.isoformat(),
            "display": display,
        },
        display,
    )


@next_cmd.command(
    examples="""\
  twozhakes next weekday 0
  twozhakes --zone Europe/Paris next weekday 5 --from 2020-03-30"""
)
@click.argument("weekday", type=click.IntRange(0, 6))
@click.option("--inclusive", is_flag=True, help="Answer today if today matches.")
@click.option("--from", "origin", default=NOW, show_default=True, help="Starting instant.")
@click.pass_obj
def weekday(app: AppContext, weekday: int, inclusive: bool, origin: str) -> None:
    """Next day whose day-of-week is WEEKDAY (0 = Sunday)."""
    _emit_next(app, origin, next_day_of_week(weekday, inclusive=inclusive), f"weekday {weekday}")


@next_cmd.command(
    examples="""\
  twozhakes next month 3
  twozhakes next month 11 --inclusive --from 2020-12-15"""
)
@click.argument("month", type=click.IntRange(0, 11))
@click.option("--inclusive", is_flag=True, help="Answer this month if it matches.")
@click.option("--from", "origin", default=NOW, show_default=True, help="Starting instant.")
@click.pass_obj
def month(app: AppContext, month: int, inclusive: bool, origin: str) -> None:
    """First day of the next month MONTH (0 = January)."""
    _emit_next(app, origin, next_month(month, inclusive=inclusive), f"month {month}")
