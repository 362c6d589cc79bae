"""Epoch unit disambiguation.

A raw epoch integer carries no unit. The magnitude is compared against the
current time scaled by a threshold: anything up to ``now * threshold`` is
seconds, the next band milliseconds, then microseconds, then nanoseconds.
First match wins.

The current time is always passed in by the caller so the heuristic stays
a pure function.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from epochctl.domain.instant import Instant
from epochctl.domain.types import EpochUnit

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 10

MILLI_MULTIPLIER = 10**3
MICRO_MULTIPLIER = 10**6
NANO_MULTIPLIER = 10**9


def assumption_notice(unit: EpochUnit) -> str:
    """Advisory line announcing which unit was assumed."""
    return f"Assuming that timestamp is in {unit}."


def guess_unit(raw: int, now_seconds: int, threshold: int = DEFAULT_THRESHOLD) -> EpochUnit:
    """Return the unit *raw* most plausibly uses, given the current time.

    Examples:
        >>> guess_unit(1_700_000_000, 1_700_000_000)
        <EpochUnit.SECONDS: 'seconds'>
        >>> guess_unit(1_700_000_000_000, 1_700_000_000)
        <EpochUnit.MILLISECONDS: 'milliseconds'>
    """
    ceiling = now_seconds * threshold
    if raw <= ceiling:
        return EpochUnit.SECONDS
    if raw <= ceiling * MILLI_MULTIPLIER:
        return EpochUnit.MILLISECONDS
    if raw <= ceiling * MICRO_MULTIPLIER:
        return EpochUnit.MICROSECONDS
    return EpochUnit.NANOSECONDS


def disambiguate(
    raw: int,
    now_seconds: int,
    *,
    threshold: int = DEFAULT_THRESHOLD,
    nanoseconds_from_input: bool = False,
    on_assume: Callable[[EpochUnit, str], None] | None = None,
) -> Instant:
    """Normalize a raw epoch integer of unknown unit to an Instant.

    Args:
        raw: Epoch value in seconds, milliseconds, microseconds or nanoseconds.
        now_seconds: Current epoch seconds, used to scale the unit bands.
        threshold: Band width multiplier.
        nanoseconds_from_input: In the nanosecond band, derive the instant
            from *raw*. When False the instant is derived from
            *now_seconds*, matching epochconverter's CLI clone.
        on_assume: Receives the assumed unit and the one-line notice
            naming it.

    Floor division keeps the nanosecond remainder non-negative for
    negative inputs.
    """
    unit = guess_unit(raw, now_seconds, threshold)
    logger.debug("Assumed unit %s for raw epoch %d (now=%d)", unit, raw, now_seconds)
    if on_assume is not None:
        on_assume(unit, assumption_notice(unit))

    if unit is EpochUnit.SECONDS:
        return Instant(raw, 0)
    if unit is EpochUnit.MILLISECONDS:
        seconds, rest = divmod(raw, MILLI_MULTIPLIER)
        return Instant(seconds, MICRO_MULTIPLIER * rest)
    if unit is EpochUnit.MICROSECONDS:
        seconds, rest = divmod(raw, MICRO_MULTIPLIER)
        return Instant(seconds, MILLI_MULTIPLIER * rest)

    source = raw if nanoseconds_from_input else now_seconds
    seconds, rest = divmod(source, NANO_MULTIPLIER)
    return Instant(seconds, rest)
