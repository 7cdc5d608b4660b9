"""SambaNova Cloud adapter (OpenAI-compatible chat completions)."""

from .client import PROVIDER_NAME, SambanovaProvider

__all__ = ["SambanovaProvider", "PROVIDER_NAME"]
