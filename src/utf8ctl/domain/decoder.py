"""UTF-8 decoding — bytes to Unicode scalar values.

A single left-to-right pass over the input.  Each multi-byte unit is
assembled from its lead byte and continuation bytes, then checked for
overlong forms, out-of-range values, and UTF-16 surrogate halves.

INVARIANT: Every value in a successful result is a Unicode scalar value
(0..0xD7FF or 0xE000..0x10FFFF).
"""

from __future__ import annotations

from utf8ctl.domain.results import CodecResult, Failure, Ok
from utf8ctl.domain.types import DECODE_ERROR_DESCRIPTIONS, ErrorPolicy, Utf8ErrorReason

MAX_CODEPOINT = 0x10FFFF
SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

# (mask, pattern, extra_length, overlong_mask) per multi-byte lead byte form
_LEAD_FORMS: tuple[tuple[int, int, int, int], ...] = (
    (0xE0, 0xC0, 1, 0x7F),  # 110x xxxx
    (0xF0, 0xE0, 2, 0x7FF),  # 1110 xxxx
    (0xF8, 0xF0, 3, 0xFFFF),  # 1111 0xxx
)


def is_continuation_byte(byte: int) -> bool:
    """True for bytes of the form ``10xx xxxx``."""
    return byte & 0xC0 == 0x80


def _failure(reason: Utf8ErrorReason, offset: int) -> Failure:
    return Failure(
        reason=reason,
        offset=offset,
        message=f"invalid utf8 byte sequence; {DECODE_ERROR_DESCRIPTIONS[reason]}",
    )


def decode_codepoints(
    data: bytes,
    policy: ErrorPolicy | str = ErrorPolicy.STRICT,
    *,
    errors: list[Failure] | None = None,
) -> CodecResult[list[int]]:
    """Decode UTF-8 *data* into a list of codepoints.

    In strict mode the first malformed unit aborts decoding and its
    :class:`Failure` is returned.  In lenient mode malformed units are
    skipped; if *errors* is given, a :class:`Failure` record for each
    skipped unit is appended to it.
    """
    strict = ErrorPolicy(policy) == ErrorPolicy.STRICT
    result: list[int] = []
    length = len(data)
    i = 0

    while i < length:
        start = i
        c = data[i]
        i += 1

        # 0xxx xxxx
        if c >> 7 == 0:
            result.append(c)
            continue

        for mask, pattern, extra_length, overlong_mask in _LEAD_FORMS:
            if c & mask == pattern:
                break
        else:
            if is_continuation_byte(c):
                failure = _failure(Utf8ErrorReason.UNEXPECTED_CONTINUATION_BYTE, start)
            else:
                failure = _failure(Utf8ErrorReason.INVALID_PREFIX, start)
            if strict:
                return failure
            if errors is not None:
                errors.append(failure)
            continue

        if i + extra_length > length:
            failure = _failure(Utf8ErrorReason.TOO_SHORT, start)
            if strict:
                return failure
            if errors is not None:
                errors.append(failure)
            # Drop whatever continuation bytes the truncated unit did have
            while i < length and is_continuation_byte(data[i]):
                i += 1
            continue

        # Strip the length prefix from the lead byte
        value = c & ((1 << (8 - extra_length - 1)) - 1)
        complete = True
        for _ in range(extra_length):
            byte = data[i]
            if not is_continuation_byte(byte):
                complete = False
                break
            value = (value << 6) | (byte & 0x3F)
            i += 1

        reason: Utf8ErrorReason | None = None
        if not complete:
            # Resume at the offending byte; it may start the next unit
            reason = Utf8ErrorReason.INVALID_CONTINUATION_BYTE
        elif value <= overlong_mask:
            reason = Utf8ErrorReason.OVERLONG
        elif value > MAX_CODEPOINT:
            reason = Utf8ErrorReason.OUT_OF_RANGE
        elif SURROGATE_MIN <= value <= SURROGATE_MAX:
            reason = Utf8ErrorReason.UNPAIRED_SURROGATE

        if reason is not None:
            failure = _failure(reason, start)
            if strict:
                return failure
            if errors is not None:
                errors.append(failure)
            continue

        result.append(value)

    return Ok(result)
