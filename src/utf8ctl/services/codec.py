"""CodecService — the UTF-8 codec wrapped in ServiceResult envelopes.

Each operation coerces its input, runs the domain codec, and reports
either the payload or a structured error.  Error codes are the
:class:`~utf8ctl.domain.types.Utf8ErrorReason` values, plus:

- ``INVALID_INPUT``: input could not be coerced into bytes
- ``INVALID_FORM``: unknown normalization form
- ``INVALID_POLICY``: unknown error policy
- ``INVALID_CODEPOINT``: not a Unicode scalar value
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from utf8ctl.domain.bytes_like import BytesLike, arrayify, hexlify
from utf8ctl.domain.decoder import MAX_CODEPOINT, SURROGATE_MAX, SURROGATE_MIN, decode_codepoints
from utf8ctl.domain.encoder import encode_text
from utf8ctl.domain.errors import InvalidBytesLikeError
from utf8ctl.domain.escape import to_escaped_literal
from utf8ctl.domain.results import Failure
from utf8ctl.domain.stringify import codepoints_to_code_units, codepoints_to_text
from utf8ctl.domain.types import ErrorPolicy, NormalizationForm
from utf8ctl.services.base import BaseService
from utf8ctl.services.result import ServiceResult
from utf8ctl.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


def codepoint_label(codepoint: int) -> str:
    """Format *codepoint* as ``U+XXXX`` (at least four hex digits)."""
    return f"U+{codepoint:04X}"


def is_scalar_value(codepoint: object) -> bool:
    """True only for ints in 0..0x10FFFF outside the surrogate range."""
    if not isinstance(codepoint, int) or isinstance(codepoint, bool):
        return False
    return 0 <= codepoint <= MAX_CODEPOINT and not SURROGATE_MIN <= codepoint <= SURROGATE_MAX


def _describe(value: object) -> str:
    return f"{value:#x}" if isinstance(value, int) and not isinstance(value, bool) else repr(value)


class CodecService(BaseService):
    """Decode, encode, stringify, and escape operations."""

    # ── Decoding ─────────────────────────────────────────────────────

    @traced
    def decode(
        self,
        data: BytesLike,
        *,
        policy: ErrorPolicy | str | None = None,
    ) -> ServiceResult:
        """Decode UTF-8 *data* into codepoints and text."""
        op = "decode"
        resolved = self._resolve_policy(op, policy)
        if isinstance(resolved, ServiceResult):
            return resolved
        raw = self._coerce(op, data)
        if isinstance(raw, ServiceResult):
            return raw

        skipped: list[Failure] = []
        with trace_span("decode_codepoints") as span:
            decoded = decode_codepoints(raw, resolved, errors=skipped)
            if span:
                span.annotate("bytes", len(raw))

        if isinstance(decoded, Failure):
            return self._decode_failure(op, raw, decoded)

        codepoints = decoded.value
        log.debug("decode.complete", policy=str(resolved), codepoints=len(codepoints))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "codepoints": codepoints,
                "labels": [codepoint_label(cp) for cp in codepoints],
                "text": codepoints_to_text(codepoints),
                "byte_length": len(raw),
                "policy": str(resolved),
                "skipped": len(skipped),
            },
            warnings=self._skip_warnings(skipped),
        )

    @traced
    def escape(
        self,
        data: BytesLike,
        *,
        policy: ErrorPolicy | str | None = None,
    ) -> ServiceResult:
        """Render UTF-8 *data* as a double-quoted escaped literal."""
        op = "escape"
        resolved = self._resolve_policy(op, policy)
        if isinstance(resolved, ServiceResult):
            return resolved
        raw = self._coerce(op, data)
        if isinstance(raw, ServiceResult):
            return raw

        skipped: list[Failure] = []
        literal = to_escaped_literal(raw, resolved, errors=skipped)
        if isinstance(literal, Failure):
            return self._decode_failure(op, raw, literal)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "literal": literal.value,
                "byte_length": len(raw),
                "policy": str(resolved),
                "skipped": len(skipped),
            },
            warnings=self._skip_warnings(skipped),
        )

    # ── Encoding ─────────────────────────────────────────────────────

    @traced
    def encode(
        self,
        text: str,
        *,
        form: NormalizationForm | str | None = None,
    ) -> ServiceResult:
        """Encode *text* as UTF-8, normalizing to *form* first."""
        op = "encode"
        resolved = self._resolve_form(op, form)
        if isinstance(resolved, ServiceResult):
            return resolved

        with trace_span("encode_text") as span:
            encoded = encode_text(text, resolved)
            if span:
                span.annotate("chars", len(text))

        if isinstance(encoded, Failure):
            log.debug("encode.failed", reason=str(encoded.reason), offset=encoded.offset)
            return self._fail(op, encoded.reason.value, encoded.message, offset=encoded.offset)

        raw = encoded.value
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "hex": hexlify(raw, prefix=self.settings.output.hex_prefix),
                "bytes": list(raw),
                "byte_length": len(raw),
                "form": resolved.value or "none",
            },
        )

    @traced
    def codepoints(
        self,
        text: str,
        *,
        form: NormalizationForm | str | None = None,
    ) -> ServiceResult:
        """List the codepoints of *text* after a UTF-8 round trip."""
        op = "codepoints"
        resolved = self._resolve_form(op, form)
        if isinstance(resolved, ServiceResult):
            return resolved

        encoded = encode_text(text, resolved)
        if isinstance(encoded, Failure):
            return self._fail(op, encoded.reason.value, encoded.message, offset=encoded.offset)

        codepoints = decode_codepoints(encoded.value).unwrap()
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "codepoints": codepoints,
                "labels": [codepoint_label(cp) for cp in codepoints],
                "byte_length": len(encoded.value),
                "form": resolved.value or "none",
            },
        )

    # ── Stringifying ─────────────────────────────────────────────────

    @traced
    def stringify(self, codepoints: Sequence[int]) -> ServiceResult:
        """Convert *codepoints* into UTF-16 code units and text."""
        op = "stringify"
        for index, codepoint in enumerate(codepoints):
            if not is_scalar_value(codepoint):
                return self._fail(
                    op,
                    "INVALID_CODEPOINT",
                    f"not a Unicode scalar value: {_describe(codepoint)}",
                    index=index,
                    codepoint=codepoint,
                )

        units = codepoints_to_code_units(codepoints)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "code_units": units,
                "labels": [f"0x{unit:04x}" for unit in units],
                "text": codepoints_to_text(codepoints),
            },
        )

    # ── Helpers ──────────────────────────────────────────────────────

    def _resolve_policy(
        self, op: str, policy: ErrorPolicy | str | None
    ) -> ErrorPolicy | ServiceResult:
        if policy is None:
            return self.settings.codec.policy
        try:
            return ErrorPolicy(policy)
        except ValueError:
            return self._fail(op, "INVALID_POLICY", f"Unknown error policy: {policy!r}")

    def _resolve_form(
        self, op: str, form: NormalizationForm | str | None
    ) -> NormalizationForm | ServiceResult:
        if form is None:
            return self.settings.codec.normalization
        try:
            return NormalizationForm(form)
        except ValueError:
            return self._fail(op, "INVALID_FORM", f"Unknown normalization form: {form!r}")

    def _coerce(self, op: str, data: BytesLike) -> bytes | ServiceResult:
        try:
            return arrayify(data)
        except InvalidBytesLikeError as exc:
            return self._fail(op, "INVALID_INPUT", str(exc), value=repr(exc.value))

    def _decode_failure(self, op: str, raw: bytes, failure: Failure) -> ServiceResult:
        log.debug("decode.failed", reason=str(failure.reason), offset=failure.offset)
        detail: dict[str, Any] = {"offset": failure.offset}
        if failure.offset < len(raw):
            detail["byte"] = f"0x{raw[failure.offset]:02x}"
        return self._fail(op, failure.reason.value, failure.message, **detail)

    @staticmethod
    def _skip_warnings(skipped: list[Failure]) -> list[str]:
        warnings: list[str] = []
        for failure in skipped:
            log.debug("decode.skipped", reason=str(failure.reason), offset=failure.offset)
            warnings.append(f"Skipped {failure.reason.value} at offset {failure.offset}")
        return warnings
