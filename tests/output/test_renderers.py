"""Tests for JSON and table rendering."""

from __future__ import annotations

import json

from rich.console import Console

from twozhakes.output.console import create_console, get_output
from twozhakes.output.renderers import render_fields, render_json


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print("[tz.zone]UTC[/]")
        assert get_output(console) == "UTC\n"

    def test_returns_console(self) -> None:
        assert isinstance(create_console(), Console)


class TestRenderers:
    def test_json_is_sorted_and_indented(self) -> None:
        text = render_json({"zone": "UTC", "epoch_ms": 0})
        assert text.splitlines()[1].strip() == '"epoch_ms": 0,'
        assert json.loads(text) == {"zone": "UTC", "epoch_ms": 0}

    def test_fields_table(self) -> None:
        text = render_fields(
            "UTC",
            "2020-03-07T13:00:00.000Z",
            [("hour", "unit", 13), ("dayOfYear", "field", 67)],
            no_color=True,
        )
        assert "2020-03-07T13:00:00.000Z" in text
        assert "UTC" in text
        assert "dayOfYear" in text
        assert "67" in text
        assert not text.endswith("\n")
