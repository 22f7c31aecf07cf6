"""Raising convenience wrappers around the codec.

These accept any bytes-like value (see :func:`~utf8ctl.domain.bytes_like.arrayify`)
and raise :class:`~utf8ctl.domain.errors.Utf8Error` instead of returning
a ``Failure``.

>>> to_utf8_bytes("hi")
b'hi'
>>> to_utf8_string("0xf09f9880") == "\\U0001F600"
True
>>> to_escaped_utf8_string(b"a\\tb")
'"a\\\\tb"'
>>> to_utf8_codepoints("\\U0001F600")
[128512]
"""

from __future__ import annotations

from utf8ctl.domain.bytes_like import BytesLike, arrayify
from utf8ctl.domain.decoder import decode_codepoints
from utf8ctl.domain.encoder import encode_text
from utf8ctl.domain.escape import to_escaped_literal
from utf8ctl.domain.stringify import codepoints_to_text
from utf8ctl.domain.types import ErrorPolicy, NormalizationForm


def _policy(ignore_errors: bool) -> ErrorPolicy:
    return ErrorPolicy.LENIENT if ignore_errors else ErrorPolicy.STRICT


def to_utf8_bytes(
    text: str,
    form: NormalizationForm | str = NormalizationForm.CURRENT,
) -> bytes:
    """Encode *text* as UTF-8, optionally normalizing it first."""
    return encode_text(text, form).unwrap()


def to_utf8_string(data: BytesLike, ignore_errors: bool = False) -> str:
    """Decode UTF-8 *data* into a ``str``."""
    codepoints = decode_codepoints(arrayify(data), _policy(ignore_errors)).unwrap()
    return codepoints_to_text(codepoints)


def to_utf8_codepoints(
    text: str,
    form: NormalizationForm | str = NormalizationForm.CURRENT,
) -> list[int]:
    """Return the codepoints of *text* after a UTF-8 round trip."""
    return decode_codepoints(to_utf8_bytes(text, form)).unwrap()


def to_escaped_utf8_string(data: BytesLike, ignore_errors: bool = False) -> str:
    """Render UTF-8 *data* as a double-quoted escaped literal."""
    return to_escaped_literal(arrayify(data), _policy(ignore_errors)).unwrap()
