"""
Configuration error type.

Raised for malformed provider settings: an unparsable host or base path, a
non-integer timeout, and similar values that can never yield a valid request.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ConfigError(ProviderError):
    """Provider configuration is present but unusable."""

    def __init__(
        self,
        message: str,
        provider: str,
        *,
        model: Optional[str] = None,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.CONFIG,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


__all__ = ["ConfigError"]
