"""CodecResult — tagged success/failure values returned by the codec.

INVARIANT: Codec functions never raise for malformed text.  Strict mode
returns a :class:`Failure`; lenient mode always returns :class:`Ok`.

Both variants support structural pattern matching::

    match decode_codepoints(data):
        case Ok(codepoints):
            ...
        case Failure(reason=reason, offset=offset):
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from utf8ctl.domain.errors import Utf8Error
from utf8ctl.domain.types import Utf8ErrorReason

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful codec output."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A rejected unit of input.

    Attributes:
        reason: Which check rejected the input.
        offset: Index of the first byte (decoder) or code unit (encoder)
            of the rejected unit.
        message: Human-readable description.
    """

    reason: Utf8ErrorReason
    offset: int
    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the failure as a :class:`Utf8Error`."""
        raise self.to_error()

    def to_error(self) -> Utf8Error:
        return Utf8Error(
            f"{self.message} (offset {self.offset})",
            reason=self.reason,
            offset=self.offset,
        )


CodecResult = Ok[T] | Failure
