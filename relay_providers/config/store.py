"""Injectable configuration stores for provider adapters.

Adapters never read ``os.environ`` directly. They receive a
:class:`ConfigStore` exposing two lookups, ``get_param`` for plain settings and
``get_secret`` for credentials, each raising :class:`ConfigNotFoundError` when
the key is absent. Tests and embedding hosts pass a :class:`MappingConfig`;
applications use :class:`Config` (or the cached :func:`default_config`).

Merge order for :class:`Config` (first hit wins)
------------------------------------------------
1. Process environment (after the one-time ``.env`` load).
2. External YAML file pointed to by ``RELAY_CONFIG_FILE`` (or passed
   explicitly). Top-level keys are params; the ``secrets`` mapping holds
   secrets::

       SAMBANOVA_HOST: https://api.sambanova.ai
       SAMBANOVA_TIMEOUT: 120
       secrets:
         SAMBANOVA_API_KEY: sk-...

Values are returned as stored: environment values are strings, YAML values
keep their parsed type. Callers coerce.
"""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

import yaml

from .env import load_dotenv_once

CONFIG_FILE_ENV = "RELAY_CONFIG_FILE"


class ConfigNotFoundError(KeyError):
    """Raised when a configuration key has no value in any source."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"configuration key '{self.key}' not found"


@runtime_checkable
class ConfigStore(Protocol):
    """Read-only key lookup capability injected into adapters."""

    def get_param(self, key: str) -> Any:
        """Return a non-secret value or raise :class:`ConfigNotFoundError`."""
        ...

    def get_secret(self, key: str) -> Any:
        """Return a secret value or raise :class:`ConfigNotFoundError`."""
        ...


class MappingConfig:
    """In-memory store backed by plain dictionaries.

    Parameters:
        params: Non-secret values.
        secrets: Secret values. Kept separate so tests catch adapters that read
            a secret through the param channel.
    """

    def __init__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        secrets: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._params: Dict[str, Any] = dict(params or {})
        self._secrets: Dict[str, Any] = dict(secrets or {})

    def get_param(self, key: str) -> Any:
        if key not in self._params:
            raise ConfigNotFoundError(key)
        return self._params[key]

    def get_secret(self, key: str) -> Any:
        if key not in self._secrets:
            raise ConfigNotFoundError(key)
        return self._secrets[key]


def _load_yaml_file(path: Optional[Path]) -> Dict[str, Any]:
    """Parse the YAML config file; a missing file or non-mapping yields ``{}``."""
    if path is None or not path.is_file():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return data if isinstance(data, dict) else {}


class Config:
    """Environment-first store with an optional YAML file behind it.

    Parameters:
        config_path: YAML file path; defaults to ``$RELAY_CONFIG_FILE`` when set.
        environ: Mapping used instead of ``os.environ`` (tests).
        load_dotenv: Load ``.env`` into the process environment once before
            the first lookup. Ignored when ``environ`` is supplied.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        load_dotenv: bool = True,
    ) -> None:
        if environ is None and load_dotenv:
            load_dotenv_once()
        self._environ = environ if environ is not None else os.environ
        if config_path is None and self._environ.get(CONFIG_FILE_ENV):
            config_path = Path(self._environ[CONFIG_FILE_ENV])
        self._file = _load_yaml_file(config_path)

    def _from_env(self, key: str) -> Optional[str]:
        val = self._environ.get(key)
        if val is None:
            val = self._environ.get(key.upper())
        return val

    def get_param(self, key: str) -> Any:
        val = self._from_env(key)
        if val is not None:
            return val
        if key in self._file and key != "secrets":
            return self._file[key]
        raise ConfigNotFoundError(key)

    def get_secret(self, key: str) -> Any:
        val = self._from_env(key)
        if val is not None:
            return val
        secrets = self._file.get("secrets")
        if isinstance(secrets, dict) and key in secrets:
            return secrets[key]
        raise ConfigNotFoundError(key)


def get_param_or(config: ConfigStore, key: str, default: Any) -> Any:
    """Return ``config.get_param(key)``, or ``default`` when the key is absent."""
    try:
        return config.get_param(key)
    except ConfigNotFoundError:
        return default


@lru_cache(maxsize=1)
def default_config() -> Config:
    """Return the process-wide :class:`Config`, built on first use."""
    return Config()


__all__ = [
    "CONFIG_FILE_ENV",
    "ConfigNotFoundError",
    "ConfigStore",
    "MappingConfig",
    "Config",
    "default_config",
    "get_param_or",
]
