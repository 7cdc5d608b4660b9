"""
Construction-time error raised when a required secret is absent.

An adapter that raises this error was never built; callers must not expect a
partially-initialized instance.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class MissingCredentialError(ProviderError):
    """Required credential (e.g. ``SAMBANOVA_API_KEY``) could not be resolved.

    Attributes:
        key: Name of the configuration key that was missing.
    """

    def __init__(self, key: str, provider: str, *, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.MISSING_CREDENTIAL,
            message=f"required secret '{key}' is not configured",
            provider=provider,
            model=model,
        )
        self.key = key


__all__ = ["MissingCredentialError"]
