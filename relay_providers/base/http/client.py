"""Async HTTP plumbing for OpenAI-compatible provider adapters.

Purpose:
    Build the ``httpx.AsyncClient`` an adapter owns, resolve the completion
    endpoint from host + base path, and turn raw HTTP responses into decoded
    JSON payloads or taxonomy errors.

External dependencies:
    - ``httpx`` for the asynchronous client and URL handling.

Timeout strategy:
    - One timeout is configured on the client at construction and applies to
      each phase (connect, read, write, pool) separately; it is not a total
      deadline. There is no per-request override and no retry; a timeout
      surfaces as a :class:`RequestFailedError` with code ``timeout``.

Lifecycle:
    - Each adapter owns exactly one client and closes it via ``aclose``. The
      client is safe to share across concurrent ``complete`` calls.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx

from ..errors import ConfigError, ErrorCode, RequestFailedError

_MAX_ERROR_DETAIL = 500


def build_async_client(
    timeout_seconds: float,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` with the given per-phase timeout.

    Parameters:
        timeout_seconds: Applied to connect, read, write and pool phases.
        transport: Optional transport (``httpx.MockTransport`` in tests).
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(float(timeout_seconds)), transport=transport)


def join_endpoint(host: str, base_path: str, *, provider: str) -> str:
    """Resolve ``base_path`` against ``host`` using RFC 3986 reference rules.

    ``https://api.example.com`` + ``v1`` gives ``https://api.example.com/v1``.
    As with any relative reference, a host with a path but no trailing slash
    has its last segment replaced.

    Raises:
        ConfigError: When ``host`` is not an absolute http(s) URL or the join
            fails.
    """
    try:
        base = httpx.URL(str(host))
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigError(f"Invalid base URL: {exc}", provider, raw=exc) from exc
    if base.scheme not in ("http", "https") or not base.host:
        raise ConfigError(f"Invalid base URL: '{host}' is not an absolute http(s) URL", provider)
    try:
        return str(base.join(str(base_path)))
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigError(f"Failed to construct endpoint URL: {exc}", provider, raw=exc) from exc


def _error_detail(response: httpx.Response) -> str:
    """Pull a human-readable message out of an error response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:_MAX_ERROR_DETAIL]
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str):
            return err
        if body.get("message"):
            return str(body["message"])
    return response.text[:_MAX_ERROR_DETAIL]


def handle_response_openai_compat(
    response: httpx.Response,
    *,
    provider: str,
    model: Optional[str] = None,
) -> Dict[str, Any]:
    """Decode an OpenAI-compatible response body or raise.

    Parameters:
        response: Completed ``httpx`` response.
        provider: Provider id for error context.
        model: Requested model for error context.

    Returns:
        The decoded JSON object.

    Raises:
        RequestFailedError: Non-2xx status (code classified from the status,
            ``context_length`` for context overflows) or a 2xx body that is not
            a JSON object (code ``decode``).
    """
    status = response.status_code
    if not response.is_success:
        detail = _error_detail(response)
        code = None
        lowered = detail.lower()
        if status == 400 and ("context_length" in lowered or "context length" in lowered):
            code = ErrorCode.CONTEXT_LENGTH
        raise RequestFailedError(
            f"HTTP {status}: {detail}",
            provider,
            model=model,
            status_code=status,
            code=code,
        )
    try:
        payload = response.json()
    except ValueError as exc:
        raise RequestFailedError(
            f"Response body is not valid JSON: {exc}",
            provider,
            model=model,
            status_code=status,
            code=ErrorCode.DECODE,
            raw=exc,
        ) from exc
    if not isinstance(payload, dict):
        raise RequestFailedError(
            f"Expected a JSON object, got {type(payload).__name__}",
            provider,
            model=model,
            status_code=status,
            code=ErrorCode.DECODE,
        )
    return payload


__all__ = ["build_async_client", "join_endpoint", "handle_response_openai_compat"]
