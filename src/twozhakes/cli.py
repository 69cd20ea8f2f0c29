"""Root CLI group for twozhakes with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from twozhakes import __version__
from twozhakes.commands import register_commands
from twozhakes.commands._context import AppContext
from twozhakes.config.settings import TwozhakesSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="twozhakes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="JSON log lines on stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-z", "--zone", default=None, help="IANA zone id, e.g. America/Los_Angeles.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    zone: str | None,
) -> None:
    """twozhakes — timezone-aware date arithmetic from the command line."""
    try:
        settings = TwozhakesSettings.from_cli(
            config_path=config_path,
            json_output=json_output or None,
            verbose=verbose or None,
            log_json=log_json or None,
            zone=zone,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
