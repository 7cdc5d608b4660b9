"""Pydantic DTOs validated at the adapter boundary."""

from .provider_settings import ProviderSettings
from .tool import Tool

__all__ = ["ProviderSettings", "Tool"]
