"""Commands: read fields and getters of an instant."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from twozhakes.algebra.getters import format as format_getter
from twozhakes.algebra.registry import Unit, setters
from twozhakes.commands._base import TzCommand
from twozhakes.commands._context import reported_errors
from twozhakes.commands._steps import build_getter
from twozhakes.output.renderers import render_fields

if TYPE_CHECKING:
    from twozhakes.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  twozhakes --zone America/Los_Angeles extract 2020-03-07T13:00:00Z hour day date
  twozhakes extract now isoWeeksInYear --format "dddd, MMMM Do YYYY"
  twozhakes extract 2020-11-03 is_election_year
  twozhakes --json extract now year month""",
)
@click.argument("instant")
@click.argument("names", metavar="FIELD...", nargs=-1)
@click.option("--format", "pattern", default=None, help="Also render with this pattern.")
@click.pass_obj
def extract(app: AppContext, instant: str, names: tuple[str, ...], pattern: str | None) -> None:
    """Read FIELDs (or no-argument getters) of INSTANT in the selected zone.

    With neither FIELD nor --format, prints the default rendering.
    """
    i = app.parse_instant(instant)
    zone = app.zone
    values: dict[str, Any] = {}
    if names:
        app.load_plugins()
    with reported_errors():
        for name in names:
            values[name] = zone.extract(i, build_getter(name, app.algebra))
        if pattern is not None or not names:
            values["format"] = zone.extract(i, format_getter(pattern))

    lines = [f"{name}: {value}" for name, value in values.items()]
    if not names:
        lines = [str(values["format"])]
    app.emit(
        {"zone": zone.zone_id, "instant": i.isoformat(), "values": values},
        "\n".join(lines),
    )


@click.command(
    cls=TzCommand,
    examples="""\
  twozhakes fields now
  twozhakes --zone Asia/Tokyo fields 2020-03-07T13:00:00Z
  twozhakes --json fields now""",
)
@click.argument("instant")
@click.pass_obj
def fields(app: AppContext, instant: str) -> None:
    """Show every calendar field of INSTANT in the selected zone."""
    i = app.parse_instant(instant)
    zone = app.zone
    rows = [
        (name, "unit" if isinstance(entry, Unit) else "field", zone.extract(i, entry))
        for name, entry in setters.items()
    ]
    app.emit(
        {"zone": zone.zone_id, "instant": i.isoformat(), "fields": {n: v for n, _, v in rows}},
        render_fields(zone.zone_id, i.isoformat(), rows),
    )
