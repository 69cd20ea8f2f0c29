"""Command: apply operator steps to an instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from twozhakes.algebra.getters import format as format_getter
from twozhakes.commands._base import TzCommand
from twozhakes.commands._context import reported_errors
from twozhakes.commands._steps import build_step

if TYPE_CHECKING:
    from twozhakes.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  twozhakes --zone America/Los_Angeles operate 2020-03-07T13:00:00Z add:1:day
  twozhakes operate now subtract:1:day set:hour:3
  twozhakes --zone America/New_York operate 2020-02-05 add:1:month start:month set:hour:9
  twozhakes operate now next_day_of_week:4 --format "dddd, MMMM Do YYYY" """,
)
@click.argument("instant")
@click.argument("steps", metavar="STEP...", nargs=-1, required=True)
@click.option("--format", "pattern", default=None, help="Render the result with this pattern.")
@click.pass_obj
def operate(app: AppContext, instant: str, steps: tuple[str, ...], pattern: str | None) -> None:
    """Apply STEPs left to right to INSTANT in the selected zone.

    A STEP is NAME[:ARG...], e.g. add:1:day, set:hour:3, start:month.
    """
    start = app.parse_instant(instant)
    zone = app.zone
    app.load_plugins()
    with reported_errors():
        ops = [build_step(step, app.algebra) for step in steps]
        result = zone.operate(start, *ops)
        rendered = zone.extract(result, format_getter(pattern)) if pattern else None

    payload = {
        "zone": zone.zone_id,
        "input": start.isoformat(),
        "steps": list(steps),
        "output": result.isoformat(),
    }
    if rendered is not None:
        payload["format"] = rendered
    app.emit(payload, rendered if rendered is not None else result.isoformat())
