"""Rich Console factory and theme for twozhakes output.

Creates Console instances that render to a StringIO buffer, so renderers
return plain strings and the CLI decides where they go. In non-TTY
environments (tests, pipes) Rich disables color codes automatically.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TWOZHAKES_THEME = Theme(
    {
        "tz.zone": "bold cyan",
        "tz.instant": "bold",
        "tz.field": "green",
        "tz.unit": "bold green",
        "tz.value": "magenta",
        "tz.muted": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=TWOZHAKES_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
