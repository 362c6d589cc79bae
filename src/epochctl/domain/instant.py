"""Instant — an absolute point in time as epoch seconds plus nanoseconds.

INVARIANT: ``nanoseconds`` is always a non-negative remainder in
``[0, 999_999_999]``; the sign lives in ``seconds`` alone.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLI = 1_000_000

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class InstantOutOfRangeError(ValueError):
    """Raised when an instant has no calendar representation."""

    def __init__(self, seconds: int) -> None:
        super().__init__(f"Timestamp {seconds} is outside the supported date range.")
        self.seconds = seconds


@dataclass(frozen=True, slots=True)
class Instant:
    """Immutable UTC instant.

    Attributes:
        seconds: Whole seconds since 1970-01-01T00:00:00 UTC (may be negative).
        nanoseconds: Sub-second remainder, always non-negative.
    """

    seconds: int
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.nanoseconds < NANOS_PER_SECOND:
            msg = f"nanoseconds must be in [0, {NANOS_PER_SECOND - 1}], got {self.nanoseconds}"
            raise ValueError(msg)

    @classmethod
    def now(cls, clock: Callable[[], int] = time.time_ns) -> Instant:
        """Current instant from a nanosecond clock (``time.time_ns`` by default)."""
        seconds, nanoseconds = divmod(clock(), NANOS_PER_SECOND)
        return cls(seconds, nanoseconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Instant:
        """Convert an offset-aware datetime by applying its UTC offset."""
        if dt.tzinfo is None or dt.utcoffset() is None:
            msg = "Cannot convert a naive datetime to an Instant"
            raise ValueError(msg)
        delta = dt - UNIX_EPOCH
        seconds = delta.days * 86_400 + delta.seconds
        return cls(seconds, delta.microseconds * 1_000)

    @property
    def millis(self) -> int:
        """Epoch milliseconds, truncating sub-millisecond precision."""
        return self.seconds * 1_000 + self.nanoseconds // NANOS_PER_MILLI

    def to_datetime(self, tz: tzinfo | None = UTC) -> datetime:
        """Aware datetime for this instant in *tz* (system local zone when None).

        Python datetimes carry microseconds, so nanoseconds are truncated.
        """
        try:
            dt = UNIX_EPOCH + timedelta(
                seconds=self.seconds, microseconds=self.nanoseconds // 1_000
            )
            return dt.astimezone(tz)
        except (OverflowError, ValueError) as exc:
            raise InstantOutOfRangeError(self.seconds) from exc
