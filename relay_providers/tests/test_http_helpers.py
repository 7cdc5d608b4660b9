from __future__ import annotations

import httpx
import pytest

from relay_providers.base.errors import ConfigError, ErrorCode, RequestFailedError
from relay_providers.base.http import build_async_client, handle_response_openai_compat, join_endpoint
from relay_providers.base.utils import parse_custom_headers


def test_parse_custom_headers_basic():
    assert parse_custom_headers("a=1,b=2") == {"a": "1", "b": "2"}  # nosec B101


def test_parse_custom_headers_drops_malformed_pairs():
    assert parse_custom_headers("a=1,bad,c=3") == {"a": "1", "c": "3"}  # nosec B101


def test_parse_custom_headers_edge_cases():
    assert parse_custom_headers("") == {}  # nosec B101
    assert parse_custom_headers(" k = v=w , k=later") == {"k": "later"}  # nosec B101
    assert parse_custom_headers("token=abc=") == {"token": "abc="}  # nosec B101


@pytest.mark.parametrize(
    "host,base_path,expected",
    [
        ("https://api.sambanova.ai", "v1", "https://api.sambanova.ai/v1"),
        ("https://api.sambanova.ai/", "v1/chat/completions", "https://api.sambanova.ai/v1/chat/completions"),
        ("http://localhost:8080/proxy/", "v1", "http://localhost:8080/proxy/v1"),
    ],
)
def test_join_endpoint(host, base_path, expected):
    assert join_endpoint(host, base_path, provider="p") == expected  # nosec B101


@pytest.mark.parametrize("host", ["not-a-url", "ftp://files.example", "https://"])
def test_join_endpoint_rejects_bad_hosts(host):
    with pytest.raises(ConfigError) as ei:
        join_endpoint(host, "v1", provider="p")
    assert ei.value.code is ErrorCode.CONFIG  # nosec B101


def test_handle_response_success():
    response = httpx.Response(200, json={"ok": True})
    assert handle_response_openai_compat(response, provider="p") == {"ok": True}  # nosec B101


def test_handle_response_context_length_overflow():
    response = httpx.Response(400, json={"error": {"message": "This model's maximum context length is 8192"}})
    with pytest.raises(RequestFailedError) as ei:
        handle_response_openai_compat(response, provider="p", model="m")
    assert ei.value.code is ErrorCode.CONTEXT_LENGTH  # nosec B101
    assert ei.value.status_code == 400  # nosec B101
    assert ei.value.model == "m"  # nosec B101


def test_handle_response_non_object_json_is_decode_error():
    with pytest.raises(RequestFailedError) as ei:
        handle_response_openai_compat(httpx.Response(200, json=[1, 2]), provider="p")
    assert ei.value.code is ErrorCode.DECODE  # nosec B101


def test_handle_response_uses_plain_text_detail():
    with pytest.raises(RequestFailedError) as ei:
        handle_response_openai_compat(httpx.Response(503, text="maintenance"), provider="p")
    assert ei.value.message == "HTTP 503: maintenance"  # nosec B101
    assert ei.value.code is ErrorCode.UNAVAILABLE  # nosec B101


@pytest.mark.asyncio
async def test_build_async_client_applies_timeout():
    client = build_async_client(30)
    try:
        assert client.timeout == httpx.Timeout(30.0)  # nosec B101
    finally:
        await client.aclose()
