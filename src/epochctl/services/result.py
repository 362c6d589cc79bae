"""ServiceResult and ServiceError: the contract between ConvertService and the CLI.

INVARIANT: ConvertService returns a ServiceResult instead of raising for bad
input (unparseable dates, out-of-range instants, unknown zones). The CLI
renders the result and picks the exit code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes carried in ``--json`` output."""

    MISSING_TIMEZONE = "MISSING_TIMEZONE"
    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    INVALID_TIMEZONE = "INVALID_TIMEZONE"


class ServiceError(BaseModel):
    """Why a conversion failed, plus the values that led there."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one conversion.

    Attributes:
        ok: Whether an instant was resolved and rendered.
        op: ``convert_epoch``, ``convert_datetime`` or ``convert_now``.
        data: Rendered values (``epoch_seconds``, ``epoch_millis``, ``gmt``,
            ``local``) plus the op's input details.
        warnings: Caveats about the printed values, shown on stderr.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
