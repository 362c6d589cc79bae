"""ConvertService: epoch/datetime conversions for the CLI.

Each entry point resolves an :class:`Instant` (from a raw epoch integer,
a datetime string, or the clock) and renders it into the payload shared
by all conversion results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import tzinfo
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from epochctl.domain.instant import Instant, InstantOutOfRangeError
from epochctl.domain.parsing import (
    DatetimeParseError,
    MissingTimezoneError,
    normalize,
    parse,
)
from epochctl.domain.render import render
from epochctl.domain.types import EpochUnit
from epochctl.domain.units import disambiguate
from epochctl.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from epochctl.config.settings import EpochSettings

logger = logging.getLogger(__name__)

NANOSECOND_INPUT_WARNING = (
    "Nanosecond input is not converted; the current time is shown instead. "
    "Set [epoch] nanoseconds_from_input = true to convert the value."
)


class ConvertService:
    """Convert epoch values and human datetimes into display payloads.

    Args:
        settings: Resolved CLI/env/TOML settings.
        clock: Nanosecond wall clock. Read at most once per call.
    """

    def __init__(
        self,
        settings: EpochSettings,
        *,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._settings = settings
        self._clock = clock

    def from_epoch(self, raw: int) -> ServiceResult:
        """Convert an epoch integer of unknown unit."""
        op = "convert_epoch"
        cfg = self._settings.epoch
        now_seconds = Instant.now(self._clock).seconds
        extra: dict[str, Any] = {"input": raw}

        def on_assume(unit: EpochUnit, notice: str) -> None:
            extra["unit"] = str(unit)
            extra["notice"] = notice

        instant = disambiguate(
            raw,
            now_seconds,
            threshold=cfg.threshold,
            nanoseconds_from_input=cfg.nanoseconds_from_input,
            on_assume=on_assume,
        )
        warnings: list[str] = []
        if extra["unit"] == EpochUnit.NANOSECONDS and not cfg.nanoseconds_from_input:
            warnings.append(NANOSECOND_INPUT_WARNING)
        return self._result(op, instant, extra, warnings)

    def from_datetime(self, text: str) -> ServiceResult:
        """Convert a human datetime string carrying a timezone."""
        op = "convert_datetime"
        try:
            instant = parse(text, strict_offset=self._settings.parse.strict_offset)
        except DatetimeParseError as exc:
            if isinstance(exc, MissingTimezoneError):
                code = ErrorCode.MISSING_TIMEZONE
            else:
                code = ErrorCode.UNRECOGNIZED_FORMAT
            logger.debug("Rejected datetime input %r: %s", exc.text, code)
            return ServiceResult.failure(op, code, str(exc), input=exc.text)
        return self._result(op, instant, {"input": normalize(text)})

    def now(self) -> ServiceResult:
        """Convert the current time."""
        return self._result("convert_now", Instant.now(self._clock), {})

    # ── Internals ─────────────────────────────────────────────────────

    def _local_zone(self) -> tzinfo | None:
        name = self._settings.display.timezone
        return ZoneInfo(name) if name else None

    def _result(
        self,
        op: str,
        instant: Instant,
        extra: dict[str, Any],
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        try:
            local_zone = self._local_zone()
        except (ZoneInfoNotFoundError, ValueError) as exc:
            name = self._settings.display.timezone
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_TIMEZONE,
                f"Unknown timezone {name!r} in [display] timezone",
                timezone=name,
                reason=str(exc),
            )

        try:
            seconds, millis, gmt, local = render(instant, local_zone)
        except InstantOutOfRangeError as exc:
            return ServiceResult.failure(
                op,
                ErrorCode.OUT_OF_RANGE,
                str(exc),
                **extra,
                epoch_seconds=instant.seconds,
                nanoseconds=instant.nanoseconds,
            )

        data: dict[str, Any] = {
            **extra,
            "epoch_seconds": int(seconds),
            "epoch_millis": int(millis),
            "nanoseconds": instant.nanoseconds,
            "gmt": gmt,
            "local": local,
            "output_fmt": str(self._settings.effective_output_fmt),
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings or [])
