"""Escaped literal rendering for byte sequences.

Produces a double-quoted, JSON-style literal: printable ASCII passes
through, a handful of controls get short escapes, and everything else
becomes ``\\uXXXX`` (astral characters as two escapes).
"""

from __future__ import annotations

from collections.abc import Sequence

from utf8ctl.domain.decoder import decode_codepoints
from utf8ctl.domain.results import CodecResult, Failure, Ok
from utf8ctl.domain.stringify import surrogate_pair
from utf8ctl.domain.types import ErrorPolicy

_NAMED_ESCAPES: dict[int, str] = {
    8: "\\b",
    9: "\\t",
    10: "\\n",
    13: "\\r",
    34: '\\"',
    92: "\\\\",
}


def _unicode_escape(value: int) -> str:
    return f"\\u{value:04x}"


def escape_codepoint(codepoint: int) -> str:
    """Render a single codepoint as a literal fragment."""
    named = _NAMED_ESCAPES.get(codepoint)
    if named is not None:
        return named
    if 0x20 <= codepoint < 0x7F:
        return chr(codepoint)
    if codepoint <= 0xFFFF:
        return _unicode_escape(codepoint)
    high, low = surrogate_pair(codepoint)
    return _unicode_escape(high) + _unicode_escape(low)


def escape_codepoints(codepoints: Sequence[int]) -> str:
    """Render *codepoints* as a quoted literal."""
    return '"' + "".join(escape_codepoint(cp) for cp in codepoints) + '"'


def to_escaped_literal(
    data: bytes,
    policy: ErrorPolicy | str = ErrorPolicy.STRICT,
    *,
    errors: list[Failure] | None = None,
) -> CodecResult[str]:
    """Decode *data* and render it as a quoted literal."""
    decoded = decode_codepoints(data, policy, errors=errors)
    if isinstance(decoded, Failure):
        return decoded
    return Ok(escape_codepoints(decoded.value))
