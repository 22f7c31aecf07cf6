"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, utf8ctl.toml holds only overrides.
An absent or empty file yields strict decoding with no normalization.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from utf8ctl.domain.types import ErrorPolicy, NormalizationForm


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    policy: ErrorPolicy = ErrorPolicy.STRICT
    normalization: NormalizationForm = NormalizationForm.CURRENT


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    hex_prefix: bool = True
    max_rows: int = Field(default=64, ge=1)
