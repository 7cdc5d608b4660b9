"""Provider Protocol (single-class module).

Defines the capability set every vendor adapter satisfies so a host can swap
providers transparently: static metadata, the model configuration in use, and
a single asynchronous completion call.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Tuple, runtime_checkable

from ..dto import Tool
from ..models import Message, ModelConfig, ProviderMetadata, ProviderUsage


@runtime_checkable
class Provider(Protocol):
    """Minimal interface for LLM provider adapters.

    Implementations hold no per-call mutable state; one instance per
    (provider, model) pair is expected to serve many concurrent calls.
    """

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        """Static description usable without an instance."""
        ...

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"sambanova"``."""
        ...

    def get_model_config(self) -> ModelConfig:
        """Return the model configuration this adapter was built with."""
        ...

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool],
    ) -> Tuple[Message, ProviderUsage]:
        """Run one completion and return the assistant message plus usage.

        Failure handling: raise taxonomy errors
        (:class:`~relay_providers.base.errors.ProviderError` subclasses); never
        mutate ``messages`` or ``tools``.
        """
        ...
