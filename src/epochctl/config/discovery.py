"""Locating ``epochctl.toml``.

Precedence: ``--config PATH``, then the ``EPOCHCTL_CONFIG`` env var, then
the nearest ``epochctl.toml`` in the working directory or one of its
parents (the way git finds ``.git/``). A file named explicitly through
the flag or the env var must exist; the walk-up may find nothing.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "epochctl.toml"
CONFIG_ENV_VAR = "EPOCHCTL_CONFIG"


class ConfigNotFoundError(FileNotFoundError):
    """An explicitly named config file does not exist."""

    def __init__(self, path: Path, source: str) -> None:
        super().__init__(f"Config file {path} (from {source}) does not exist")
        self.path = path
        self.source = source


def _walk_up(start: Path) -> Path | None:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file for this run, or None when there is none.

    Raises:
        ConfigNotFoundError: *explicit* or ``EPOCHCTL_CONFIG`` names a
            missing file.
    """
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ConfigNotFoundError(path, "--config")
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            raise ConfigNotFoundError(path, CONFIG_ENV_VAR)
        return path

    return _walk_up(start or Path.cwd())
