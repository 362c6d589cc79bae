"""structlog configuration for epochctl.

Log lines always go to stderr so stdout carries only the conversion:

- Human (default): console renderer, ISO-8601 UTC timestamps, colored
  when stderr is a terminal
- JSON (--log-json): one object per line, ``timestamp`` in Unix epoch
  seconds

Only the ``epochctl`` logger is raised to DEBUG by ``--verbose``. Values
bound with :func:`structlog.contextvars.bind_contextvars` (the CLI binds
``op``) are merged into every record, stdlib ones included.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler rendering through structlog.

    Safe to call more than once; the previous handler and any bound
    context are discarded.

    Args:
        verbose: DEBUG for ``epochctl`` loggers. When False, only WARNING+.
        log_json: JSON renderer with epoch timestamps instead of the
            console renderer.
    """
    structlog.contextvars.clear_contextvars()

    if log_json:
        timestamper = structlog.processors.TimeStamper(fmt=None, utc=True)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("epochctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
