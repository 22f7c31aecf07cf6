"""BaseService — shared foundation for utf8ctl services.

Every service receives the resolved :class:`Utf8Settings` at construction
time and reads its defaults (error policy, normalization form, output
options) from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from utf8ctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from utf8ctl.config.settings import Utf8Settings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CodecService(BaseService):
            def decode(self, data: BytesLike) -> ServiceResult:
                ...
    """

    def __init__(self, settings: Utf8Settings | None = None) -> None:
        if settings is None:
            from utf8ctl.config.settings import Utf8Settings

            settings = Utf8Settings()
        self._settings = settings

    @property
    def settings(self) -> Utf8Settings:
        return self._settings

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
