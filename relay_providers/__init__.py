"""relay_providers package

Pluggable LLM provider adapters behind one asynchronous interface.

Purpose:
    Give a host application a single ``Provider`` contract (``metadata``,
    ``get_model_config``, ``complete``) with one adapter per vendor. The
    SambaNova adapter speaks the OpenAI-compatible chat completions protocol;
    a mock adapter serves offline tests.

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create`, :class:`ProviderFactory`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode` and the
      construction/request taxonomy
    - Models: :class:`Message`, :class:`ContentPart`, :class:`ModelConfig`,
      :class:`Usage`, :class:`ProviderUsage`, :class:`ProviderMetadata`,
      :class:`Tool`

Example::

    provider = create("sambanova")
    message, usage = await provider.complete("Be brief.", [Message.user().with_text("hi")], [])
"""

from typing import Any, Optional

from .base.dto import Tool
from .base.errors import (
    ConfigError,
    ErrorCode,
    MissingCredentialError,
    ProviderError,
    RequestFailedError,
    UsageError,
)
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import Provider
from .base.models import (
    ContentPart,
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Usage,
)
from .config import ConfigStore, MappingConfig

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core helpers
    "create",
    "ProviderFactory",
    "UnknownProviderError",
    "Provider",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "MissingCredentialError",
    "ConfigError",
    "RequestFailedError",
    "UsageError",
    # Models
    "ContentPart",
    "Message",
    "ModelConfig",
    "ProviderMetadata",
    "ProviderUsage",
    "Usage",
    "Tool",
    # Config
    "ConfigStore",
    "MappingConfig",
]


def create(
    provider_name: str,
    model: Optional[ModelConfig] = None,
    *,
    config: Optional[ConfigStore] = None,
    **kwargs: Any,
) -> Any:
    """Instantiate a provider adapter via :class:`ProviderFactory`.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"sambanova"``).
    model:
        Model configuration; the adapter's default model when omitted.
    config:
        Configuration store; the process-wide environment/YAML store when
        omitted.
    **kwargs:
        Adapter-specific keyword arguments (for example ``transport``).

    Returns
    -------
    object
        An adapter instance satisfying :class:`Provider`.

    Raises
    ------
    ProviderError
        ``not_found`` code when the provider is unknown. Construction errors
        raised by the adapter (``MissingCredentialError``, ``ConfigError``)
        are re-raised unchanged.
    """
    try:
        return ProviderFactory.create(provider_name, model, config=config, **kwargs)
    except UnknownProviderError as e:
        raise ProviderError(
            code=ErrorCode.NOT_FOUND,
            message=f"Failed to create provider '{provider_name}': {e}",
            provider=provider_name,
        ) from e
