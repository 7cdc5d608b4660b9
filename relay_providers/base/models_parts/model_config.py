"""
Model configuration value object.

`ModelConfig` names the model an adapter talks to and carries optional
generation parameters. It is owned by the caller, immutable, and read by the
request encoder on every completion call.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelConfig:
    """Model name plus optional generation parameters.

    Attributes:
        model_name: Vendor model identifier sent in the request body.
        context_limit: Advisory context window size in tokens.
        temperature: Sampling temperature; omitted from the request when ``None``.
        max_tokens: Completion token cap; omitted from the request when ``None``.
    """

    model_name: str
    context_limit: Optional[int] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    @classmethod
    def new(cls, model_name: str) -> "ModelConfig":
        return cls(model_name=model_name)

    def with_temperature(self, temperature: Optional[float]) -> "ModelConfig":
        return replace(self, temperature=temperature)

    def with_max_tokens(self, max_tokens: Optional[int]) -> "ModelConfig":
        return replace(self, max_tokens=max_tokens)

    def with_context_limit(self, context_limit: Optional[int]) -> "ModelConfig":
        return replace(self, context_limit=context_limit)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ModelConfig"]
