"""
Static provider description model.

`ProviderMetadata` is exposed by every adapter class (not instance) so a host
or registry can list providers, their models and configuration keys without
building an HTTP client or touching credentials.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ...config.store import ConfigNotFoundError, ConfigStore
from .config_key import ConfigKey


@dataclass(frozen=True)
class ProviderMetadata:
    """Registry-facing description of a provider adapter.

    Attributes:
        name: Canonical provider id (e.g. ``"sambanova"``).
        display_name: Human-readable vendor name.
        description: One-line description for listings.
        default_model: Model id used when the caller does not choose one.
        known_models: Published model ids, in documented order.
        model_doc_link: URL to the vendor's model documentation.
        config_keys: Recognized configuration keys.
    """

    name: str
    display_name: str
    description: str
    default_model: str
    known_models: Tuple[str, ...]
    model_doc_link: str
    config_keys: Tuple[ConfigKey, ...] = ()

    def missing_keys(self, config: ConfigStore) -> List[str]:
        """Return required keys that have neither a configured value nor a default.

        Parameters:
            config: Store to probe; secrets are looked up through ``get_secret``.
        """
        missing: List[str] = []
        for key in self.config_keys:
            if not key.required or key.default is not None:
                continue
            getter = config.get_secret if key.secret else config.get_param
            try:
                value = getter(key.name)
            except ConfigNotFoundError:
                value = None
            if value is None or str(value).strip() == "":
                missing.append(key.name)
        return missing

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the metadata fields."""
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "default_model": self.default_model,
            "known_models": list(self.known_models),
            "model_doc_link": self.model_doc_link,
            "config_keys": [k.to_dict() for k in self.config_keys],
        }


__all__ = [
    "ProviderMetadata",
]
