"""Provider Factory utilities.

Purpose
-------
Centralize provider-agnostic creation of adapter instances implementing the
``Provider`` protocol. Adapters are imported lazily using ``importlib`` so
that listing providers or reading their metadata never pulls in vendor code
that is not used.

External dependencies
---------------------
- Standard library only (``importlib``, ``inspect``).

Failure semantics
-----------------
- Lookup and import problems raise :class:`UnknownProviderError`.
- Errors raised by an adapter's ``from_env`` (``MissingCredentialError``,
  ``ConfigError``) propagate unchanged so callers can tell a missing key from
  an unknown provider.
"""

from __future__ import annotations

import inspect
from importlib import import_module
from typing import Any, Dict, List, Optional, Tuple, Type

from ..config import ConfigStore
from .models import ModelConfig, ProviderMetadata


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter's ``from_env`` rejected the keyword arguments it was given.
    """


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"sambanova"``)."""

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "sambanova": {"module": "relay_providers.sambanova.client", "class": "SambanovaProvider"},
        "mock": {"module": "relay_providers.mock.client", "class": "MockProvider"},
    }

    @classmethod
    def adapter_class(cls, provider: str) -> Type:
        """Return the adapter class registered under ``provider``.

        Raises
        ------
        UnknownProviderError
            If the name is unknown, the module fails to import, or the class
            is missing from it.
        """
        name = (provider or "").lower().strip()
        spec = cls._PROVIDERS.get(name)
        if not spec:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc
        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

    @classmethod
    def create(
        cls,
        provider: str,
        model: Optional[ModelConfig] = None,
        *,
        config: Optional[ConfigStore] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance via its ``from_env`` constructor.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"sambanova"``).
        model:
            Model configuration; the adapter's default model when omitted.
        config:
            Configuration store handed to the adapter.
        **kwargs:
            Adapter-specific keyword arguments (e.g. ``transport``).

        Returns
        -------
        Any
            Instance implementing ``Provider``.

        Raises
        ------
        UnknownProviderError
            If the provider is unknown or rejects the given arguments.
        ProviderError
            Construction errors from the adapter itself, unchanged.
        """
        klass = cls.adapter_class(provider)
        # only a signature mismatch is a lookup error; TypeErrors raised while
        # building the adapter propagate
        try:
            inspect.signature(klass.from_env).bind(model, config=config, **kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter constructor: {exc}"
            ) from exc
        return klass.from_env(model, config=config, **kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the supported canonical provider names in registration order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def metadata(cls, provider: str) -> ProviderMetadata:
        """Return static metadata for ``provider`` without instantiating it."""
        return cls.adapter_class(provider).metadata()

    @classmethod
    def all_metadata(cls) -> List[ProviderMetadata]:
        return [cls.metadata(name) for name in cls.supported()]


__all__ = ["ProviderFactory", "UnknownProviderError"]
