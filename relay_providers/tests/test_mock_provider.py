from __future__ import annotations

import pytest

from relay_providers.base.dto import Tool
from relay_providers.base.errors import ErrorCode, ProviderError
from relay_providers.base.interfaces import Provider
from relay_providers.base.models import Message, ModelConfig, Usage
from relay_providers.config import MappingConfig
from relay_providers.mock import MockProvider
from relay_providers.mock.client import failing


def test_mock_satisfies_provider_protocol():
    provider = MockProvider()
    assert isinstance(provider, Provider)  # nosec B101
    assert provider.get_model_config().model_name == "mock-echo"  # nosec B101
    assert MockProvider.metadata().missing_keys(MappingConfig()) == []  # nosec B101


@pytest.mark.asyncio
async def test_mock_echoes_last_user_text():
    provider = MockProvider()
    history = [
        Message.user().with_text("first"),
        Message.assistant().with_text("reply"),
        Message.user().with_text("second"),
    ]

    message, usage = await provider.complete("sys", history, [])

    assert message == Message.assistant().with_text("second")  # nosec B101
    assert usage.model == "mock-echo"  # nosec B101
    assert usage.usage == Usage(1, 1, 2)  # nosec B101


@pytest.mark.asyncio
async def test_mock_reply_from_config():
    provider = MockProvider.from_env(ModelConfig.new("m"), config=MappingConfig(params={"MOCK_REPLY": "fixed"}))
    async with provider:
        message, usage = await provider.complete("sys", [Message.user().with_text("hi")], [])
    assert message.text() == "fixed"  # nosec B101
    assert usage.model == "m"  # nosec B101


@pytest.mark.asyncio
async def test_mock_with_no_user_text_returns_empty_message():
    message, _ = await MockProvider().complete("sys", [], [])
    assert message.is_empty()  # nosec B101


@pytest.mark.asyncio
async def test_mock_rejects_duplicate_tools():
    with pytest.raises(ProviderError) as ei:
        await MockProvider().complete("sys", [], [Tool(name="t"), Tool(name="t")])
    assert ei.value.code is ErrorCode.VALIDATION  # nosec B101


@pytest.mark.asyncio
async def test_mock_fail_with_raises_configured_error():
    provider = MockProvider(fail_with=failing(ErrorCode.RATE_LIMIT))
    with pytest.raises(ProviderError) as ei:
        await provider.complete("sys", [Message.user().with_text("x")], [])
    assert ei.value.code is ErrorCode.RATE_LIMIT  # nosec B101
