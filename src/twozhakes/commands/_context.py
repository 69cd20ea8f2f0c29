"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the algebra and plugin manager lazily so
``--help`` never touches the zone database, and centralizes output
(JSON or human text) and error conversion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

import click

from twozhakes.domain.errors import TwozhakesError
from twozhakes.domain.instant import Instant
from twozhakes.output.renderers import render_json

if TYPE_CHECKING:
    from twozhakes.algebra.context import Algebra
    from twozhakes.algebra.zone import ZoneContext
    from twozhakes.config.settings import TwozhakesSettings
    from twozhakes.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

NOW = "now"


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn library errors into ``click.ClickException`` (exit code 1)."""
    try:
        yield
    except TwozhakesError as exc:
        raise click.ClickException(str(exc)) from exc


class AppContext:
    """State shared by every subcommand of one invocation."""

    def __init__(self, settings: TwozhakesSettings) -> None:
        self.settings = settings
        self._algebra: Algebra | None = None
        self._plugins: PluginManager | None = None

        from twozhakes.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.config_path is not None:
            logger.debug("Using config %s", settings.config_path)

    @property
    def algebra(self) -> Algebra:
        if self._algebra is None:
            from twozhakes.algebra.context import Algebra

            self._algebra = Algebra.from_settings(self.settings)
        return self._algebra

    def load_plugins(self) -> PluginManager:
        """Install built-in and entry-point plugins once; later calls reuse them."""
        if self._plugins is None:
            from twozhakes.plugins.manager import default_plugin_manager

            self._plugins = default_plugin_manager()
        return self._plugins

    @property
    def zone(self) -> ZoneContext:
        """The zone selected by ``--zone``, settings, or the host."""
        zone_id = self.settings.zone or self.algebra.local_zone_id
        with reported_errors():
            return self.algebra.zone(zone_id)

    def parse_instant(self, text: str) -> Instant:
        """Parse a command-line instant in the selected zone."""
        if text.strip().lower() == NOW:
            return Instant.now()
        with reported_errors():
            return self.zone.parse(text)

    def emit(self, payload: dict[str, Any], human: str) -> None:
        """Write *payload* as JSON under ``--json``, else the *human* text."""
        if self.settings.json_output:
            click.echo(render_json(payload))
        else:
            click.echo(human)
