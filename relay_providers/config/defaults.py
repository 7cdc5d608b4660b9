"""relay_providers.config.defaults
================================

Central place for small, stable default values used by the provider adapters.
Only plain constants live here; this module imports nothing from the rest of
the package to avoid circular dependencies.
"""

from __future__ import annotations

# ---- SambaNova ----
SAMBANOVA_DEFAULT_HOST = "https://api.sambanova.ai"
SAMBANOVA_DEFAULT_BASE_PATH = "v1"
SAMBANOVA_DEFAULT_MODEL = "Meta-Llama-3.1-405B-Instruct"
SAMBANOVA_KNOWN_MODELS = (
    "Meta-Llama-3.1-405B-Instruct",
    "Meta-Llama-3.3-70B-Instruct",
)
SAMBANOVA_DOC_URL = "https://api.sambanova.ai"

# ---- Shared HTTP ----
# Per-phase (connect, read, write, pool) timeout for the adapter-owned HTTP client (seconds).
DEFAULT_REQUEST_TIMEOUT_SECONDS = 600

# ---- Mock ----
MOCK_DEFAULT_MODEL = "mock-echo"


__all__ = [
    "SAMBANOVA_DEFAULT_HOST",
    "SAMBANOVA_DEFAULT_BASE_PATH",
    "SAMBANOVA_DEFAULT_MODEL",
    "SAMBANOVA_KNOWN_MODELS",
    "SAMBANOVA_DOC_URL",
    "DEFAULT_REQUEST_TIMEOUT_SECONDS",
    "MOCK_DEFAULT_MODEL",
]
