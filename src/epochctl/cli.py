"""Root CLI command for epochctl with global flags."""

from __future__ import annotations

import click
import structlog

from epochctl import __version__
from epochctl.commands._base import EpochCommand
from epochctl.commands._context import AppContext
from epochctl.config.settings import EpochSettings
from epochctl.domain.types import OutputFormat

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


@click.command(
    "epochctl",
    cls=EpochCommand,
    examples="""\
  epochctl
  epochctl 1700000000
  epochctl 1700000000123
  epochctl -86400
  epochctl -d "Sat, 31 Jan 1970 00:00:00 +0000"
  epochctl -d "31-01-1970 00:00:00 GMT"
  epochctl -d "1970/01/31 09:00:00 +0900"
  epochctl --json 1700000000""",
)
@click.version_option(version=__version__, prog_name="epochctl")
@click.argument("epoch", required=False, type=click.IntRange(INT64_MIN, INT64_MAX))
@click.option(
    "-d",
    "--datetime",
    "datetime_text",
    default=None,
    metavar="TEXT",
    help="Human date to convert. Must end in a timezone offset or GMT.",
)
@click.option(
    "-o",
    "--output-fmt",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=None,
    help="Output format (reserved; dates are always printed as RFC 2822).",
)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the epoch seconds.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    epoch: int | None,
    datetime_text: str | None,
    output_fmt: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Convert between Unix epoch timestamps and human-readable dates.

    EPOCH may be given in seconds, milliseconds, microseconds or
    nanoseconds; the unit is guessed from its magnitude.  Negative values
    are accepted as is.  Without EPOCH or --datetime the current time is
    converted.

    \b
    Supported --datetime formats:
      RFC 2822: 31 Jan 1970 00:00:00 +0000
      D-M-Y:    31-01-1970 00:00:00 +0000
      M/D/Y:    01/31/1970 00:00:00 +0000
      Y/M/D:    1970/01/31 00:00:00 +0000

    \b
    Supported timezones:
      GMT
      Offset from local time to UTC (UTC being +0000)
    """
    if epoch is not None and datetime_text is not None:
        raise click.UsageError("EPOCH and --datetime are mutually exclusive.")

    obj = ctx.ensure_object(dict)
    settings = EpochSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        output_fmt=output_fmt,
    )
    app = AppContext(settings, clock=obj.get("clock"))

    if datetime_text is not None:
        structlog.contextvars.bind_contextvars(op="convert_datetime")
        result = app.service.from_datetime(datetime_text)
    elif epoch is not None:
        structlog.contextvars.bind_contextvars(op="convert_epoch")
        result = app.service.from_epoch(epoch)
    else:
        structlog.contextvars.bind_contextvars(op="convert_now")
        result = app.service.now()
    app.emit(result)
