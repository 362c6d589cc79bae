"""Human datetime parsing.

Input must carry a timezone. ``GMT`` is rewritten to ``+0000`` before the
suffix check, then the formats in :data:`DATETIME_FORMATS` are tried in
order and the first one that parses wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from epochctl.domain.instant import Instant

logger = logging.getLogger(__name__)

# Loose check: any string ending in four digits passes, with or without a sign.
TIMEZONE_SUFFIX = re.compile(r"\d{4}$")
STRICT_TIMEZONE_SUFFIX = re.compile(r"[+-]\d{4}$")

_WEEKDAYS = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")
_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

# [Day,] D Mon YYYY HH:MM[:SS] +HHMM. Zone names other than GMT (already
# rewritten by normalize) and unsigned offsets are not accepted.
RFC2822_PATTERN = re.compile(
    r"""
    ^(?:(?P<weekday>[A-Za-z]{3})\s*,\s*)?
    (?P<day>\d{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>\d{2,4})\s+
    (?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s+
    (?P<sign>[+-])(?P<tz_hours>\d{2})(?P<tz_minutes>\d{2})$
    """,
    re.VERBOSE,
)


class DatetimeParseError(ValueError):
    """Base class for datetime input errors. ``text`` is the normalized input."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class MissingTimezoneError(DatetimeParseError):
    """The input does not end in a recognizable timezone offset."""

    def __init__(self, text: str) -> None:
        super().__init__(
            f"Could not parse input {text}. Provide valid timezone or GMT as suffix.", text
        )


class UnrecognizedFormatError(DatetimeParseError):
    """The input has an offset but matches none of the supported formats."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Could not parse input: {text}", text)


def normalize(text: str) -> str:
    """Strip surrounding whitespace and spell ``GMT`` as ``+0000``."""
    return text.strip().replace("GMT", "+0000")


def has_timezone(text: str, *, strict: bool = False) -> bool:
    """Whether *text* ends in a timezone offset.

    The loose check accepts any four trailing digits. ``strict`` requires a
    signed ``+HHMM``/``-HHMM`` suffix.
    """
    pattern = STRICT_TIMEZONE_SUFFIX if strict else TIMEZONE_SUFFIX
    return pattern.search(text) is not None


def _rfc2822_year(digits: str) -> int:
    """Expand an obsolete two- or three-digit year (RFC 2822 section 4.3)."""
    year = int(digits)
    if year < 50:
        return year + 2000
    if year < 1000:
        return year + 1900
    return year


def _parse_rfc2822(text: str) -> datetime:
    match = RFC2822_PATTERN.match(text)
    if match is None:
        msg = f"Not an RFC 2822 date: {text!r}"
        raise ValueError(msg)
    month = match["month"].lower()
    if month not in _MONTHS:
        msg = f"Unknown month {match['month']!r}"
        raise ValueError(msg)

    offset = timedelta(hours=int(match["tz_hours"]), minutes=int(match["tz_minutes"]))
    if match["sign"] == "-":
        offset = -offset
    dt = datetime(
        _rfc2822_year(match["year"]),
        _MONTHS.index(month) + 1,
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        int(match["second"] or 0),
        tzinfo=timezone(offset),
    )

    weekday = match["weekday"]
    if weekday is not None and (
        weekday.lower() not in _WEEKDAYS or _WEEKDAYS.index(weekday.lower()) != dt.weekday()
    ):
        msg = f"Weekday {weekday!r} does not match the date"
        raise ValueError(msg)
    return dt


def _strptime(fmt: str) -> Callable[[str], datetime]:
    def parser(text: str) -> datetime:
        return datetime.strptime(text, fmt)

    return parser


DATETIME_FORMATS: tuple[tuple[str, Callable[[str], datetime]], ...] = (
    ("RFC 2822", _parse_rfc2822),
    ("D-M-Y", _strptime("%d-%m-%Y %H:%M:%S %z")),
    ("M/D/Y", _strptime("%m/%d/%Y %H:%M:%S %z")),
    ("Y/M/D", _strptime("%Y/%m/%d %H:%M:%S %z")),
)


def parse(text: str, *, strict_offset: bool = False) -> Instant:
    """Parse a human datetime string with an explicit timezone into an Instant.

    Supported formats, tried in this order:

    - RFC 2822: ``Sat, 31 Jan 1970 00:00:00 +0000`` (weekday and seconds
      optional, two-digit years per RFC 2822 section 4.3)
    - D-M-Y: ``31-01-1970 00:00:00 +0000``
    - M/D/Y: ``01/31/1970 00:00:00 +0000``
    - Y/M/D: ``1970/01/31 00:00:00 +0000``

    Raises:
        MissingTimezoneError: No timezone suffix after normalization.
        UnrecognizedFormatError: None of the formats matched.
    """
    normalized = normalize(text)
    if not has_timezone(normalized, strict=strict_offset):
        raise MissingTimezoneError(normalized)

    for name, parser in DATETIME_FORMATS:
        try:
            dt = parser(normalized)
        except (TypeError, ValueError):
            continue
        logger.debug("Parsed %r as %s", normalized, name)
        return Instant.from_datetime(dt)

    raise UnrecognizedFormatError(normalized)
