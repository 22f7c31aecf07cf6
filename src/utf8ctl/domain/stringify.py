"""Codepoints to UTF-16 code units and native strings."""

from __future__ import annotations

import struct
from collections.abc import Sequence


def surrogate_pair(codepoint: int) -> tuple[int, int]:
    """Split an astral *codepoint* (> 0xFFFF) into high and low surrogates."""
    offset = codepoint - 0x10000
    return 0xD800 + ((offset >> 10) & 0x3FF), 0xDC00 + (offset & 0x3FF)


def codepoints_to_code_units(codepoints: Sequence[int]) -> list[int]:
    """Expand *codepoints* into UTF-16 code units."""
    units: list[int] = []
    for codepoint in codepoints:
        if codepoint <= 0xFFFF:
            units.append(codepoint)
        else:
            units.extend(surrogate_pair(codepoint))
    return units


def code_units_to_text(units: Sequence[int]) -> str:
    """Join UTF-16 *units* into a ``str``, pairing surrogates."""
    raw = struct.pack(f"<{len(units)}H", *units)
    return raw.decode("utf-16-le", "surrogatepass")


def codepoints_to_text(codepoints: Sequence[int]) -> str:
    return code_units_to_text(codepoints_to_code_units(codepoints))
