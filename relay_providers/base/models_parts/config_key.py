"""
Configuration key descriptor.

Each adapter publishes the keys it reads so a host can render setup forms and
validate configuration without instantiating the adapter.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ConfigKey:
    """One recognized configuration key.

    Attributes:
        name: Key name, e.g. ``SAMBANOVA_API_KEY``.
        required: Whether the adapter needs a value (explicit or default).
        secret: Whether the value must be read through the secret channel.
        default: Default value as a string, ``None`` when there is none.
    """

    name: str
    required: bool
    secret: bool
    default: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ConfigKey"]
