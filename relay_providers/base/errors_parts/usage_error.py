"""
Usage decoding error type.

Raised by the OpenAI-compatible decoder when a response carries no usable
``usage`` object. Adapters downgrade this specific error to a zero-valued
``Usage``; every other decode failure propagates.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class UsageError(ProviderError):
    """Token usage could not be extracted from a response payload."""

    def __init__(self, message: str, provider: str = "openai_compat", *, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.USAGE, message=message, provider=provider, model=model)


__all__ = ["UsageError"]
