"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``EPOCHCTL_*`` prefix
  3. TOML file    - ``epochctl.toml`` discovered via walk-up
  4. Code defaults - baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`epochctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from epochctl.config.discovery import ConfigNotFoundError, find_config
from epochctl.config.models import DisplayConfig, EpochConfig, ParseConfig
from epochctl.domain.types import OutputFormat


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from an ``epochctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
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


class EpochSettings(BaseSettings):
    """Unified settings for the epochctl CLI.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        output_fmt: ``--output-fmt`` value; falls back to ``display.output_fmt``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "EPOCHCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    output_fmt: OutputFormat | None = None

    # --- TOML sections ---
    epoch: EpochConfig = Field(default_factory=EpochConfig)
    parse: ParseConfig = Field(default_factory=ParseConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @property
    def effective_output_fmt(self) -> OutputFormat:
        """Output format from the CLI flag, else from ``[display]``."""
        return self.output_fmt or self.display.output_fmt

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
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> EpochSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``epochctl.toml`` by walking up from *start_dir* (default: cwd).
        CLI flags are merged as highest-priority overrides; ``None`` flags
        are dropped so they do not mask lower-priority sources.

        Raises:
            click.ClickException: The named config file is missing or is
                not valid TOML.
        """
        try:
            toml_path = find_config(start_dir, explicit=config_path)
        except ConfigNotFoundError as exc:
            raise click.ClickException(str(exc)) from exc

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
