"""utf8ctl — UTF-8 codec: bytes, codepoints, and UTF-16 text."""

from utf8ctl.api import (
    to_escaped_utf8_string,
    to_utf8_bytes,
    to_utf8_codepoints,
    to_utf8_string,
)
from utf8ctl.domain.errors import InvalidBytesLikeError, Utf8Error
from utf8ctl.domain.types import ErrorPolicy, NormalizationForm, Utf8ErrorReason

__version__ = "0.1.0"

__all__ = [
    "ErrorPolicy",
    "InvalidBytesLikeError",
    "NormalizationForm",
    "Utf8Error",
    "Utf8ErrorReason",
    "__version__",
    "to_escaped_utf8_string",
    "to_utf8_bytes",
    "to_utf8_codepoints",
    "to_utf8_string",
]
