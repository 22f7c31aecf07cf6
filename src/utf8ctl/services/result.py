"""The envelope every CodecService operation returns.

Library callers and the CLI both read this type: ``ok`` says which half
is populated, ``data`` holds the codec payload and ``error`` the reason
it was refused.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation was refused.

    ``code`` is a :class:`~utf8ctl.domain.types.Utf8ErrorReason` value or
    one of the service-level codes (``INVALID_INPUT`` and friends);
    ``detail`` carries positions such as ``offset`` or ``index``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one codec operation.

    ``warnings`` lists input that lenient decoding skipped; ``meta`` holds
    telemetry when ``--verbose`` is on.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
