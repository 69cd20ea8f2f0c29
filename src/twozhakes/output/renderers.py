"""Render command payloads as JSON or human-readable text."""

from __future__ import annotations

import json
from typing import Any

from rich.table import Table

from twozhakes.output.console import create_console, get_output


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True, default=str)


def render_fields(
    zone_id: str,
    instant: str,
    rows: list[tuple[str, str, Any]],
    *,
    no_color: bool = False,
) -> str:
    """Table of ``(field, kind, value)`` rows for one instant in one zone."""
    table = Table(
        title=f"[tz.instant]{instant}[/] in [tz.zone]{zone_id}[/]",
        show_header=True,
        header_style="bold",
    )
    table.add_column("field")
    table.add_column("kind", style="tz.muted")
    table.add_column("value", justify="right", style="tz.value")
    for name, kind, value in rows:
        style = "tz.unit" if kind == "unit" else "tz.field"
        table.add_row(f"[{style}]{name}[/]", kind, str(value))

    console = create_console(no_color=no_color)
    console.print(table)
    return get_output(console).rstrip("\n")
