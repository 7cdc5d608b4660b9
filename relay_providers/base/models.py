"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.models_parts`` to keep imports stable.
"""

from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.message import Message, Role
from .models_parts.model_config import ModelConfig
from .models_parts.usage import ProviderUsage, Usage
from .models_parts.config_key import ConfigKey
from .models_parts.provider_metadata import ProviderMetadata

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
