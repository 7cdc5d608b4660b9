"""Small pure helpers shared by provider adapters."""

from .headers import parse_custom_headers

__all__ = ["parse_custom_headers"]
