"""Byte-sequence coercion for codec inputs.

Accepts the loose "bytes-like" values callers tend to have on hand and
turns them into immutable ``bytes``:

- ``bytes``, ``bytearray``, ``memoryview``
- iterables of ints in ``0..255``
- ``0x``-prefixed hex strings of even length (``"0x"`` is empty)
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from utf8ctl.domain.errors import InvalidBytesLikeError

_HEX_PATTERN = re.compile(r"^0x[0-9a-fA-F]*$")

BytesLike = bytes | bytearray | memoryview | str | Iterable[int]


def is_hex_string(value: Any) -> bool:
    """Check whether *value* is a ``0x``-prefixed hex string."""
    return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


def arrayify(value: BytesLike) -> bytes:
    """Coerce *value* into ``bytes``.

    Raises:
        InvalidBytesLikeError: If *value* is not one of the accepted forms.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)

    if isinstance(value, str):
        if not is_hex_string(value):
            raise InvalidBytesLikeError("invalid hexstring", value=value)
        digits = value[2:]
        if len(digits) % 2:
            raise InvalidBytesLikeError("hex data is odd-length", value=value)
        return bytes.fromhex(digits)

    if isinstance(value, Iterable):
        items = list(value)
        for item in items:
            if isinstance(item, bool) or not isinstance(item, int) or not 0 <= item <= 0xFF:
                raise InvalidBytesLikeError("invalid arrayify value", value=value)
        return bytes(items)

    raise InvalidBytesLikeError("invalid arrayify value", value=value)


def hexlify(data: bytes, *, prefix: bool = True) -> str:
    """Render *data* as lowercase hex, ``0x``-prefixed by default."""
    digits = data.hex()
    return f"0x{digits}" if prefix else digits
