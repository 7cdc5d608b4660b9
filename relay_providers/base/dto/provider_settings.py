"""Typed, validated connection settings owned by a provider adapter.

Purpose
-------
Capture the values an HTTP-backed adapter resolves from configuration at
construction time: endpoint host, path prefix, credential, optional extra
headers and the request timeout. Built once, never mutated; reconfiguring
means building a new adapter.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``SecretStr`` masking so the
  API key never appears in ``repr`` or logs.

Failure modes
-------------
- ``pydantic.ValidationError`` for empty host/key, a non-positive timeout, or
  header names and values that cannot be sent as HTTP/1.1 header bytes.
  Adapters translate it into :class:`~relay_providers.base.errors.ConfigError`.
"""
from __future__ import annotations

import re
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

# RFC 9110 field-name token
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Za-z-]+$")


def _check_header_value(value: str, what: str) -> None:
    if not value.isascii():
        raise ValueError(f"{what} must be ASCII")
    if "\r" in value or "\n" in value or "\0" in value:
        raise ValueError(f"{what} must not contain control characters")


class ProviderSettings(BaseModel):
    """Connection settings for an OpenAI-compatible vendor endpoint.

    Attributes
    ----------
    host:
        Scheme + authority (optionally a path) of the vendor API.
    base_path:
        Path joined onto ``host`` to form the completion endpoint.
    api_key:
        Bearer token, masked in ``repr``.
    custom_headers:
        Extra request headers, ``None`` when not configured.
    timeout_seconds:
        Per-phase (connect, read, write, pool) timeout of the owned HTTP client.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(..., min_length=1)
    base_path: str = ""
    api_key: SecretStr
    custom_headers: Optional[Dict[str, str]] = None
    timeout_seconds: int = Field(default=600, gt=0)

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: SecretStr) -> SecretStr:
        """Reject keys that cannot be sent in the ``Authorization`` header."""
        _check_header_value(v.get_secret_value(), "API key")
        return v

    @field_validator("custom_headers")
    @classmethod
    def validate_custom_headers(cls, v: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        """Header names must be tokens; values ASCII without line breaks."""
        if not v:
            return v
        for name, value in v.items():
            if not _HEADER_NAME_RE.match(name):
                raise ValueError(f"invalid header name {name!r}")
            _check_header_value(value, f"value of header {name!r}")
        return v

    def auth_headers(self) -> Dict[str, str]:
        """Return the authorization header followed by any custom headers."""
        headers = {"Authorization": f"Bearer {self.api_key.get_secret_value()}"}
        if self.custom_headers:
            headers.update(self.custom_headers)
        return headers


__all__ = ["ProviderSettings"]
