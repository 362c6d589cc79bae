"""Shared pytest fixtures and test helpers for epochctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from epochctl.config.models import DisplayConfig
from epochctl.config.settings import EpochSettings

# 2023-11-14T22:13:20.123456789Z
NOW_SECONDS = 1_700_000_000
NOW_NS = NOW_SECONDS * 1_000_000_000 + 123_456_789

# 1970-01-31T00:00:00Z
JAN_31_1970 = 2_592_000


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no EPOCHCTL_* variables.

    Keeps a stray ``epochctl.toml`` or environment override on the host
    from leaking into settings discovery.
    """
    for name in list(os.environ):
        if name.startswith("EPOCHCTL_"):
            monkeypatch.delenv(name)
    for name in ("FORCE_COLOR", "NO_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and app logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("epochctl")
    app_level = app.level
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def clock() -> Callable[[], int]:
    """Nanosecond clock frozen at NOW_NS."""
    return lambda: NOW_NS


@pytest.fixture
def settings() -> EpochSettings:
    """Default settings with a fixed local zone (+0530, no DST)."""
    return EpochSettings(display=DisplayConfig(timezone="Asia/Kolkata"))
