"""Split modules for provider-agnostic DTOs (one class per file)."""

from .content_part import ContentPart, ContentPartType
from .message import Message, Role
from .model_config import ModelConfig
from .usage import ProviderUsage, Usage
from .config_key import ConfigKey
from .provider_metadata import ProviderMetadata

__all__ = [
    "ContentPart",
    "ContentPartType",
    "Message",
    "Role",
    "ModelConfig",
    "Usage",
    "ProviderUsage",
    "ConfigKey",
    "ProviderMetadata",
]
