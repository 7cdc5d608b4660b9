"""One-protocol-per-file interface modules."""

from .provider import Provider

__all__ = ["Provider"]
