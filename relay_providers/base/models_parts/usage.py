"""
Token usage accounting models.

`Usage` holds canonical token counts. Vendors that omit counts yield zeros,
so consumers never branch on ``None``. `ProviderUsage` pairs the counts with
the model id the vendor reports having actually served.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Usage:
    """Token counts for a single completion.

    Attributes:
        input_tokens: Prompt-side tokens.
        output_tokens: Completion-side tokens.
        total_tokens: Sum reported by the vendor, or derived from the parts.
    """

    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProviderUsage:
    """Usage plus the effective model id echoed by the vendor."""

    model: str
    usage: Usage = field(default_factory=Usage)

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "usage": self.usage.to_dict()}


__all__ = ["Usage", "ProviderUsage"]
