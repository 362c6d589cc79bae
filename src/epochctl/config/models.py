"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, epochctl.toml only contains
overrides. No config file is needed at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from epochctl.domain.types import OutputFormat

# --- epochctl.toml sections ---


class EpochConfig(BaseModel):
    """[epoch] section: unit disambiguation."""

    model_config = {"frozen": True}

    threshold: int = Field(default=10, ge=1)
    nanoseconds_from_input: bool = False


class ParseConfig(BaseModel):
    """[parse] section: datetime input."""

    model_config = {"frozen": True}

    strict_offset: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    timezone: str = ""
    output_fmt: OutputFormat = OutputFormat.RFC2822
