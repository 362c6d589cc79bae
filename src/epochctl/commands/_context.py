"""AppContext: settings, logging and result emission for a CLI run.

Created once per invocation.  Owns the conversion service and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from epochctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from epochctl.config.settings import EpochSettings
    from epochctl.services.convert import ConvertService
    from epochctl.services.result import ServiceResult


class AppContext:
    """Per-invocation context.

    The service is created lazily so ``--help`` and ``--version`` never
    touch it.  *clock* is injectable for tests.
    """

    def __init__(self, settings: EpochSettings, *, clock: Callable[[], int] | None = None) -> None:
        self.settings = settings
        self._clock = clock
        self._service: ConvertService | None = None

        from epochctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> ConvertService:
        """The conversion service (created lazily on first access)."""
        if self._service is None:
            from epochctl.services.convert import ConvertService

            if self._clock is None:
                self._service = ConvertService(self.settings)
            else:
                self._service = ConvertService(self.settings, clock=self._clock)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        stream = sys.stdout if result.ok else sys.stderr
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            color=stream.isatty() or None,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
