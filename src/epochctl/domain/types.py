"""Enumerations shared across the domain and CLI layers."""

from __future__ import annotations

from enum import StrEnum


class EpochUnit(StrEnum):
    """Magnitude an epoch integer is assumed to be expressed in."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"


class OutputFormat(StrEnum):
    """Accepted values for ``--output-fmt``.

    Reserved: the selected value is recorded in results but does not
    change the rendered dates, which are always RFC 2822.
    """

    RFC2822 = "RFC2822"
    RFC3399 = "RFC3399"
