"""Mock provider package for deterministic offline testing."""

from .client import MockProvider

__all__ = ["MockProvider"]
