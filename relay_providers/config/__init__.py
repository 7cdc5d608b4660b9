"""Configuration layer for provider adapters.

Goals
-----
* Centralize defaults (hosts, base paths, models, timeouts) in ``defaults``.
* Give adapters an injected lookup capability (:class:`ConfigStore`) instead
  of a process singleton, so tests supply fakes.
* Provide the environment + YAML backed :class:`Config` for applications.

Environment Variable Conventions
--------------------------------
<PROVIDER>_API_KEY, <PROVIDER>_HOST, <PROVIDER>_BASE_PATH,
<PROVIDER>_CUSTOM_HEADERS, <PROVIDER>_TIMEOUT, e.g. SAMBANOVA_HOST.
"""
from __future__ import annotations

from .env import is_placeholder, load_dotenv_once
from .store import (
    CONFIG_FILE_ENV,
    Config,
    ConfigNotFoundError,
    ConfigStore,
    MappingConfig,
    default_config,
    get_param_or,
)

__all__ = [
    "CONFIG_FILE_ENV",
    "Config",
    "ConfigNotFoundError",
    "ConfigStore",
    "MappingConfig",
    "default_config",
    "get_param_or",
    "is_placeholder",
    "load_dotenv_once",
]
