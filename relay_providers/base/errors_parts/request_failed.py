"""
Request failure error type.

Covers transport errors (connection, timeout), non-success HTTP statuses, and
response bodies that cannot be decoded. The ``code`` is classified from the
HTTP status when one is available so orchestrators can decide whether to retry;
the adapter itself never does.
"""
from __future__ import annotations

from typing import Optional

from .classification import _HTTP_STATUS_MAP
from .error_code import ErrorCode
from .provider_error import ProviderError

_RETRYABLE = (
    ErrorCode.RATE_LIMIT,
    ErrorCode.TIMEOUT,
    ErrorCode.TRANSPORT,
    ErrorCode.SERVER_ERROR,
    ErrorCode.UNAVAILABLE,
)


class RequestFailedError(ProviderError):
    """A single completion request failed on the wire or in decoding.

    Attributes:
        status_code: HTTP status of the failed response, ``None`` when no
            response was received or the failure happened while decoding.
    """

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        status_code: Optional[int] = None,
        code: Optional[ErrorCode] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        if code is None:
            code = _HTTP_STATUS_MAP.get(status_code, ErrorCode.UNKNOWN) if status_code else ErrorCode.UNKNOWN
            if status_code is not None and code is ErrorCode.UNKNOWN and status_code >= 500:
                code = ErrorCode.SERVER_ERROR
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=code in _RETRYABLE,
            raw=raw,
        )
        self.status_code = status_code


__all__ = ["RequestFailedError"]
