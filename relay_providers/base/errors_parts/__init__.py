"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `relay_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception
from .missing_credential import MissingCredentialError
from .config_error import ConfigError
from .request_failed import RequestFailedError
from .usage_error import UsageError

__all__ = [
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "MissingCredentialError",
    "ConfigError",
    "RequestFailedError",
    "UsageError",
]
