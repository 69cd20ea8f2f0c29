"""Command: next US federal election day."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from twozhakes.algebra.getters import format as format_getter
from twozhakes.commands._base import TzCommand
from twozhakes.commands._context import NOW, reported_errors
from twozhakes.recipes.election import ELECTION_ZONE_ID, next_election_day

if TYPE_CHECKING:
    from twozhakes.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  twozhakes election
  twozhakes election --from 2020-12-01
  twozhakes --json election --from 2015-10-01""",
)
@click.option("--from", "origin", default=NOW, show_default=True, help="Starting instant.")
@click.pass_obj
def election(app: AppContext, origin: str) -> None:
    """Date of the next election day whose polls have not closed."""
    start = app.parse_instant(origin)
    with reported_errors():
        dc = app.algebra.zone(ELECTION_ZONE_ID)
        day = next_election_day(start)
        date = dc.extract(day, format_getter("YYYY-MM-DD"))
    payload = {
        "zone": ELECTION_ZONE_ID,
        "from": start.isoformat(),
        "date": date,
        "instant": day.isoformat(),
    }
    app.emit(payload, date)
