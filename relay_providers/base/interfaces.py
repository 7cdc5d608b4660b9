"""Provider interface public surface.

Re-exports the protocol(s) under ``relay_providers.base.interfaces_parts``.
"""

from .interfaces_parts.provider import Provider

__all__ = ["Provider"]
