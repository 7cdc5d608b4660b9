"""relay_providers.config.env
===========================

Environment helpers shared by the configuration stores.

Purpose
-------
- Load a ``.env`` file into the process environment exactly once.
- Detect placeholder credentials so a checked-in ``changeme`` value does not
  shadow a real key supplied through ``.env``.

Design Notes
------------
- No external dependencies; the supported grammar is ``KEY=VALUE`` per line
  with ``#`` comments, an optional ``export`` prefix and optional surrounding
  quotes.
- Real (non-placeholder) environment values are never overwritten.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Tuple

_DOTENV_LOADED = False
_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return any(marker in v for marker in _PLACEHOLDER_MARKERS) or v.startswith("test_")


def _parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(key, value)`` for an assignment line, ``None`` otherwise."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None
    if line.startswith("export "):
        line = line[len("export "):]
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_dotenv_once(path: Optional[str] = None) -> List[str]:
    """Load ``.env`` into ``os.environ`` on the first call only.

    Existing variables are replaced only when their current value is a
    placeholder (see :func:`is_placeholder`).

    Parameters
    ----------
    path: Optional[str]
        File to read; defaults to ``$DOTENV_FILE`` or ``.env``.

    Returns
    -------
    list[str]
        Keys written to the environment by this call (empty on repeat calls
        or when the file does not exist).
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return []
    _DOTENV_LOADED = True
    env_path = Path(path or os.getenv("DOTENV_FILE", ".env"))
    if not env_path.is_file():
        return []

    applied: List[str] = []
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        parsed = _parse_line(raw)
        if parsed is None:
            continue
        key, value = parsed
        if key not in os.environ or is_placeholder(os.environ.get(key)):
            os.environ[key] = value
            applied.append(key)
    return applied


def _reset_dotenv_state() -> None:
    """Allow tests to force a reload of ``.env``."""
    global _DOTENV_LOADED
    _DOTENV_LOADED = False


__all__ = [
    "is_placeholder",
    "load_dotenv_once",
]
