"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.errors_parts`` to maintain a stable import path.

Taxonomy:
    - :class:`MissingCredentialError`: required secret absent at construction.
    - :class:`ConfigError`: malformed host, base path or timeout.
    - :class:`RequestFailedError`: transport failure, non-2xx status or an
      undecodable body. Never retried by the adapter.
    - :class:`UsageError`: usage block missing; downgraded to a zero usage.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception
from .errors_parts.missing_credential import MissingCredentialError
from .errors_parts.config_error import ConfigError
from .errors_parts.request_failed import RequestFailedError
from .errors_parts.usage_error import UsageError

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "MissingCredentialError",
    "ConfigError",
    "RequestFailedError",
    "UsageError",
]
