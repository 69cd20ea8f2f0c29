"""Subcommands for twozhakes.

``register_commands`` imports command modules only when the CLI is built.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the ``next`` group and the standalone commands to *cli*."""
    from twozhakes.commands.next_cmd import next_cmd

    cli.add_command(next_cmd)

    from twozhakes.commands.election import election
    from twozhakes.commands.extract import extract, fields
    from twozhakes.commands.operate import operate
    from twozhakes.commands.parse_cmd import parse_cmd

    cli.add_command(parse_cmd)
    cli.add_command(extract)
    cli.add_command(fields)
    cli.add_command(operate)
    cli.add_command(election)
