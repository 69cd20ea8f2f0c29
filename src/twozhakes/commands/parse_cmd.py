"""Command: parse text into an instant."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from twozhakes.commands._base import TzCommand

if TYPE_CHECKING:
    from twozhakes.commands._context import AppContext


@click.command(
    "parse",
    cls=TzCommand,
    examples="""\
  twozhakes parse 2020-03-07T13:00:00Z
  twozhakes --zone America/Los_Angeles parse "2020-03-07 05:00"
  twozhakes --json parse "March 7 2020 5am" """,
)
@click.argument("text")
@click.pass_obj
def parse_cmd(app: AppContext, text: str) -> None:
    """Parse TEXT in the selected zone and print the UTC instant."""
    instant = app.parse_instant(text)
    payload = {
        "zone": app.zone.zone_id,
        "text": text,
        "instant": instant.isoformat(),
        "epoch_ms": instant.epoch_ms,
    }
    app.emit(payload, instant.isoformat())
