"""UTF-8 encoding — UTF-16 code units to bytes.

Text is walked as 16-bit code units, the way it is stored in UTF-16.
Surrogate pairs are reassembled into their scalar value before being
written as a 4-byte sequence.

INVARIANT: Encoder output always strict-decodes.  Unpaired surrogates in
either position are rejected rather than written as 3-byte sequences.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from utf8ctl.domain.normalization import normalize
from utf8ctl.domain.results import CodecResult, Failure, Ok
from utf8ctl.domain.types import NormalizationForm, Utf8ErrorReason

_HIGH_SURROGATE = 0xD800
_LOW_SURROGATE = 0xDC00
_SURROGATE_MASK = 0xFC00


def is_high_surrogate(unit: int) -> bool:
    return unit & _SURROGATE_MASK == _HIGH_SURROGATE


def is_low_surrogate(unit: int) -> bool:
    return unit & _SURROGATE_MASK == _LOW_SURROGATE


def text_to_code_units(text: str) -> list[int]:
    """Split *text* into its UTF-16 code units.

    Astral characters become surrogate pairs; lone surrogates already in
    *text* are kept as-is.
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return list(struct.unpack(f"<{len(raw) // 2}H", raw))


def _invalid_pair(offset: int) -> Failure:
    return Failure(
        reason=Utf8ErrorReason.INVALID_SURROGATE_PAIR,
        offset=offset,
        message="invalid utf-8 string",
    )


def encode_code_units(units: Sequence[int]) -> CodecResult[bytes]:
    """Encode UTF-16 *units* as UTF-8.

    Raises:
        ValueError: If a unit is outside ``0..0xFFFF``.
    """
    result = bytearray()
    length = len(units)
    i = 0

    while i < length:
        c = units[i]
        if not 0 <= c <= 0xFFFF:
            raise ValueError(f"code unit out of range at offset {i}: {c!r}")

        if c < 0x80:
            result.append(c)
        elif c < 0x800:
            result.append((c >> 6) | 0xC0)
            result.append((c & 0x3F) | 0x80)
        elif is_high_surrogate(c):
            if i + 1 >= length or not is_low_surrogate(units[i + 1]):
                return _invalid_pair(i)
            i += 1
            scalar = 0x10000 + ((c & 0x3FF) << 10) + (units[i] & 0x3FF)
            result.append((scalar >> 18) | 0xF0)
            result.append(((scalar >> 12) & 0x3F) | 0x80)
            result.append(((scalar >> 6) & 0x3F) | 0x80)
            result.append((scalar & 0x3F) | 0x80)
        elif is_low_surrogate(c):
            return _invalid_pair(i)
        else:
            result.append((c >> 12) | 0xE0)
            result.append(((c >> 6) & 0x3F) | 0x80)
            result.append((c & 0x3F) | 0x80)
        i += 1

    return Ok(bytes(result))


def encode_text(
    text: str,
    form: NormalizationForm | str = NormalizationForm.CURRENT,
) -> CodecResult[bytes]:
    """Normalize *text* to *form*, then encode it as UTF-8."""
    return encode_code_units(text_to_code_units(normalize(text, form)))
