"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, the error taxonomy and the provider
factory for use by vendor adapters and host applications.

- Interfaces: the ``Provider`` protocol every adapter satisfies
- Models (DTOs): messages, content parts, model config, usage, metadata
- Formats: OpenAI-compatible request/response translation
- Factory: lazy creation of provider adapters by canonical name
"""

from .dto import ProviderSettings, Tool
from .errors import (
    ConfigError,
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    RequestFailedError,
    UsageError,
    classify_exception,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import Provider
from .models import (
    ConfigKey,
    ContentPart,
    ContentPartType,
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Role,
    Usage,
)

__all__ = [
    # Models
    "Role",
    "ContentPartType",
    "ContentPart",
    "Message",
    "ModelConfig",
    "Usage",
    "ProviderUsage",
    "ConfigKey",
    "ProviderMetadata",
    "ProviderSettings",
    "Tool",
    # Interfaces
    "Provider",
    # Errors
    "ErrorCode",
    "ProviderError",
    "MissingCredentialError",
    "ConfigError",
    "RequestFailedError",
    "UsageError",
    "classify_exception",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
]
