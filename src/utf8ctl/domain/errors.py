"""Exceptions raised at the edges of the codec.

The codec functions themselves return :class:`~utf8ctl.domain.results.Failure`
values.  These exceptions exist for callers that prefer raising, via
``CodecResult.unwrap()`` and the :mod:`utf8ctl.api` helpers.
"""

from __future__ import annotations

from utf8ctl.domain.types import Utf8ErrorReason


class Utf8Error(ValueError):
    """Malformed UTF-8 input or malformed UTF-16 text."""

    def __init__(self, message: str, *, reason: Utf8ErrorReason, offset: int) -> None:
        super().__init__(message)
        self.reason = reason
        self.offset = offset


class InvalidBytesLikeError(ValueError):
    """A value could not be coerced into a byte sequence."""

    def __init__(self, message: str, *, value: object) -> None:
        super().__init__(message)
        self.value = value
