"""Codec enums: error policy, normalization form, and failure reasons.

These are plain value enums passed through every codec call.  None of
them carry behavior; the codec functions branch on them directly.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorPolicy(StrEnum):
    """How the decoder treats malformed input."""

    STRICT = "strict"
    LENIENT = "lenient"


class NormalizationForm(StrEnum):
    """Unicode normalization applied to text before encoding.

    ``CURRENT`` leaves the text untouched.
    """

    CURRENT = ""
    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"


class Utf8ErrorReason(StrEnum):
    """Failure kinds reported by the decoder and encoder.

    Values double as ``ServiceError.code`` strings.
    """

    # Decoder
    UNEXPECTED_CONTINUATION_BYTE = "UNEXPECTED_CONTINUATION_BYTE"
    INVALID_PREFIX = "INVALID_PREFIX"
    TOO_SHORT = "TOO_SHORT"
    INVALID_CONTINUATION_BYTE = "INVALID_CONTINUATION_BYTE"
    OVERLONG = "OVERLONG"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNPAIRED_SURROGATE = "UNPAIRED_SURROGATE"

    # Encoder
    INVALID_SURROGATE_PAIR = "INVALID_SURROGATE_PAIR"


# Human-readable suffixes for decoder messages.
DECODE_ERROR_DESCRIPTIONS: dict[Utf8ErrorReason, str] = {
    Utf8ErrorReason.UNEXPECTED_CONTINUATION_BYTE: "unexpected continuation byte",
    Utf8ErrorReason.INVALID_PREFIX: "invalid prefix",
    Utf8ErrorReason.TOO_SHORT: "too short",
    Utf8ErrorReason.INVALID_CONTINUATION_BYTE: "invalid continuation byte",
    Utf8ErrorReason.OVERLONG: "overlong",
    Utf8ErrorReason.OUT_OF_RANGE: "out-of-range",
    Utf8ErrorReason.UNPAIRED_SURROGATE: "utf-16 surrogate",
}
