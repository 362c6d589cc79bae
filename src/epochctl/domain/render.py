"""Result printer: the four representations shown for every conversion."""

from __future__ import annotations

from datetime import UTC, tzinfo
from email.utils import format_datetime

from epochctl.domain.instant import Instant

LABELS = (
    "Epoch timestamp",
    "Timestamp in milliseconds",
    "Date and time (GMT)",
    "Date and time (your time zone)",
)


def to_rfc2822(instant: Instant, tz: tzinfo | None = UTC) -> str:
    """RFC 2822 date for *instant* in *tz* (system local zone when None)."""
    return format_datetime(instant.to_datetime(tz))


def render(instant: Instant, local_zone: tzinfo | None = None) -> tuple[str, str, str, str]:
    """Render epoch seconds, epoch milliseconds, UTC date and local date.

    Raises:
        InstantOutOfRangeError: The instant has no calendar date.
    """
    return (
        str(instant.seconds),
        str(instant.millis),
        to_rfc2822(instant, UTC),
        to_rfc2822(instant, local_zone),
    )
