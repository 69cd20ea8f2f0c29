"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``TWOZHAKES_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``twozhakes.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any, ClassVar

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from twozhakes.config.discovery import find_config
from twozhakes.config.models import (
    CalendarConfig,
    RelativeTimeConfig,
    WeekConfig,
    ZonesConfig,
)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``twozhakes.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class TwozhakesSettings(BaseSettings):
    """Unified, frozen settings for the library's CLI and callers that want
    configuration-driven zone contexts (see ``Algebra.from_settings``).

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        zone: Zone used by CLI commands when ``--zone`` is not given;
            falls back to ``zones.local`` and then the host zone.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TWOZHAKES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False
    zone: str | None = None

    # --- TOML sections ---
    zones: ZonesConfig = Field(default_factory=ZonesConfig)
    week: WeekConfig = Field(default_factory=WeekConfig)
    relative_time: RelativeTimeConfig = Field(default_factory=RelativeTimeConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)

    # Retained for type-checker visibility; not used at runtime.
    _toml_path: ClassVar[Path | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> TwozhakesSettings:
        """Construct settings from a CLI invocation.

        Discovers ``twozhakes.toml`` via walk-up from *start* (or uses the
        explicit *config_path*) and merges CLI flags as highest-priority
        overrides. ``None`` flag values are dropped so they never mask
        env or TOML values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        flags = {key: value for key, value in cli_flags.items() if value is not None}
        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
