"""Deterministic mock provider for offline testing.

Purpose
-------
Provide an adapter that satisfies the ``Provider`` protocol without any
network traffic, so hosts, registries and orchestration code can be exercised
in tests. The reply echoes the text of the last user message (or a fixed
reply when one is configured) and reports a fixed usage.

External dependencies
---------------------
None. No HTTP client is created; ``aclose`` is a no-op.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from ..base.dto import Tool
from ..base.errors import ErrorCode, ProviderError
from ..base.formats import format_tools
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ConfigKey, Message, ModelConfig, ProviderMetadata, ProviderUsage, Usage
from ..config import ConfigStore, default_config, get_param_or
from ..config.defaults import MOCK_DEFAULT_MODEL

PROVIDER_NAME = "mock"


class MockProvider:
    """Adapter returning canned replies instead of calling a vendor.

    Parameters
    ----------
    model: ModelConfig
        Model configuration reported back by :meth:`get_model_config`.
    reply: Optional[str]
        Fixed reply text. When ``None`` the last user message text is echoed.
    usage: Optional[Usage]
        Usage reported for every call; defaults to ``Usage(1, 1, 2)``.
    fail_with: Optional[ProviderError]
        Error raised by every :meth:`complete` call, for failure-path tests.
    """

    def __init__(
        self,
        model: Optional[ModelConfig] = None,
        *,
        reply: Optional[str] = None,
        usage: Optional[Usage] = None,
        fail_with: Optional[ProviderError] = None,
    ) -> None:
        self._model = model or ModelConfig.new(MOCK_DEFAULT_MODEL)
        self._reply = reply
        self._usage = usage if usage is not None else Usage(input_tokens=1, output_tokens=1, total_tokens=2)
        self._fail_with = fail_with
        self._logger = get_logger("providers.mock")

    @classmethod
    def from_env(
        cls,
        model: Optional[ModelConfig] = None,
        *,
        config: Optional[ConfigStore] = None,
        reply: Optional[str] = None,
        usage: Optional[Usage] = None,
        fail_with: Optional[ProviderError] = None,
    ) -> "MockProvider":
        """Build a mock adapter; ``MOCK_REPLY`` sets a fixed reply text."""
        config = config if config is not None else default_config()
        if reply is None:
            reply = get_param_or(config, "MOCK_REPLY", None)
        return cls(
            model,
            reply=None if reply is None else str(reply),
            usage=usage,
            fail_with=fail_with,
        )

    @classmethod
    def default(cls, *, config: Optional[ConfigStore] = None) -> "MockProvider":
        return cls.from_env(config=config)

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        return ProviderMetadata(
            name=PROVIDER_NAME,
            display_name="Mock",
            description="Offline provider that echoes the last user message",
            default_model=MOCK_DEFAULT_MODEL,
            known_models=(MOCK_DEFAULT_MODEL,),
            model_doc_link="",
            config_keys=(ConfigKey("MOCK_REPLY", required=False, secret=False, default=None),),
        )

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def get_model_config(self) -> ModelConfig:
        return self._model

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool],
    ) -> Tuple[Message, ProviderUsage]:
        ctx = LogContext(provider=self.provider_name, model=self._model.model_name)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", messages=len(messages))
        try:
            # same duplicate-name check a real adapter applies
            format_tools(tools, provider=self.provider_name)
            if self._fail_with is not None:
                raise self._fail_with
        except ProviderError as exc:
            normalized_log_event(
                self._logger, "chat.error", ctx, phase="finalize", error_code=exc.code.value
            )
            raise

        text = self._reply if self._reply is not None else _last_user_text(messages)
        message = Message.assistant().with_text(text) if text else Message.assistant()
        normalized_log_event(self._logger, "chat.end", ctx, phase="finalize", tokens=self._usage)
        return message, ProviderUsage(model=self._model.model_name, usage=self._usage)

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "MockProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _last_user_text(messages: Sequence[Message]) -> str:
    for message in reversed(messages):
        if message.role == "user":
            return message.text()
    return ""


def failing(code: ErrorCode, message: str = "mock failure") -> ProviderError:
    """Return a :class:`ProviderError` suitable for ``MockProvider(fail_with=...)``."""
    return ProviderError(code=code, message=message, provider=PROVIDER_NAME)


__all__ = ["MockProvider", "failing"]
