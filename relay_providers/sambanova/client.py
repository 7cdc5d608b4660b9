"""SambanovaProvider adapter.

Talks to SambaNova's OpenAI-compatible inference API over an adapter-owned
``httpx.AsyncClient``. Request encoding and response decoding are delegated to
the shared OpenAI-compatible format helpers; this module only resolves
configuration, issues the POST and applies the usage soft-fail policy.

Configuration keys (read once in :meth:`SambanovaProvider.from_env`):
    SAMBANOVA_API_KEY         secret, required
    SAMBANOVA_HOST            default ``https://api.sambanova.ai``
    SAMBANOVA_BASE_PATH       default ``v1``
    SAMBANOVA_CUSTOM_HEADERS  secret, optional, ``k1=v1,k2=v2``
    SAMBANOVA_TIMEOUT         integer seconds, default 600

No retries: a transport failure or non-2xx status surfaces once as
:class:`RequestFailedError`.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Sequence, Tuple

import httpx
from pydantic import ValidationError

from ..base.dto import ProviderSettings, Tool
from ..base.errors import (
    ConfigError,
    MissingCredentialError,
    ProviderError,
    RequestFailedError,
    UsageError,
    classify_exception,
)
from ..base.formats import ImageFormat, create_request, get_model, get_usage, response_to_message
from ..base.http import build_async_client, handle_response_openai_compat, join_endpoint
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ConfigKey, Message, ModelConfig, ProviderMetadata, ProviderUsage, Usage
from ..base.tracing import emit_debug_trace
from ..base.utils import parse_custom_headers
from ..config import ConfigNotFoundError, ConfigStore, default_config, get_param_or
from ..config.defaults import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SAMBANOVA_DEFAULT_BASE_PATH,
    SAMBANOVA_DEFAULT_HOST,
    SAMBANOVA_DEFAULT_MODEL,
    SAMBANOVA_DOC_URL,
    SAMBANOVA_KNOWN_MODELS,
)

PROVIDER_NAME = "sambanova"


class SambanovaProvider:
    """Provider adapter for SambaNova Cloud.

    Instances are immutable after construction and safe to share across
    concurrent :meth:`complete` calls. Close with :meth:`aclose` (or use
    ``async with``) to release the HTTP connection pool.
    """

    def __init__(
        self,
        settings: ProviderSettings,
        model: ModelConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._model = model
        self._client = build_async_client(settings.timeout_seconds, transport=transport)
        self._logger = get_logger("providers.sambanova")

    @classmethod
    def from_env(
        cls,
        model: Optional[ModelConfig] = None,
        *,
        config: Optional[ConfigStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SambanovaProvider":
        """Build an adapter from a configuration store.

        Parameters:
            model: Model configuration; defaults to the published default model.
            config: Lookup capability; defaults to :func:`default_config`.
            transport: Optional ``httpx`` transport (tests inject a mock).

        Raises:
            MissingCredentialError: ``SAMBANOVA_API_KEY`` absent or blank.
            ConfigError: Non-integer/non-positive timeout, or settings that
                fail validation (e.g. non-ASCII custom header values).
        """
        config = config if config is not None else default_config()
        model = model or ModelConfig.new(cls.metadata().default_model)

        try:
            api_key = config.get_secret("SAMBANOVA_API_KEY")
        except ConfigNotFoundError:
            raise MissingCredentialError("SAMBANOVA_API_KEY", PROVIDER_NAME, model=model.model_name) from None
        if api_key is None or not str(api_key).strip():
            raise MissingCredentialError("SAMBANOVA_API_KEY", PROVIDER_NAME, model=model.model_name)

        host = get_param_or(config, "SAMBANOVA_HOST", SAMBANOVA_DEFAULT_HOST)
        base_path = get_param_or(config, "SAMBANOVA_BASE_PATH", SAMBANOVA_DEFAULT_BASE_PATH)
        try:
            custom_headers = parse_custom_headers(str(config.get_secret("SAMBANOVA_CUSTOM_HEADERS")))
        except ConfigNotFoundError:
            custom_headers = None
        timeout_raw = get_param_or(config, "SAMBANOVA_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS)
        timeout_seconds = _parse_timeout(timeout_raw, model.model_name)

        try:
            settings = ProviderSettings(
                host=str(host),
                base_path=str(base_path),
                api_key=str(api_key),
                custom_headers=custom_headers,
                timeout_seconds=timeout_seconds,
            )
        except ValidationError as exc:
            # input values are left out: key and headers are secrets
            detail = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise ConfigError(
                f"Invalid SambaNova settings: {detail}", PROVIDER_NAME, model=model.model_name, raw=exc
            ) from exc
        return cls(settings, model, transport=transport)

    @classmethod
    def default(
        cls,
        *,
        config: Optional[ConfigStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "SambanovaProvider":
        """Build an adapter for the published default model."""
        return cls.from_env(ModelConfig.new(cls.metadata().default_model), config=config, transport=transport)

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        return ProviderMetadata(
            name=PROVIDER_NAME,
            display_name="SambaNova",
            description="Meta-Llama-3.1-405B-Instruct model available via SambaNova's API",
            default_model=SAMBANOVA_DEFAULT_MODEL,
            known_models=tuple(SAMBANOVA_KNOWN_MODELS),
            model_doc_link=SAMBANOVA_DOC_URL,
            config_keys=(
                ConfigKey("SAMBANOVA_API_KEY", required=True, secret=True, default=None),
                ConfigKey("SAMBANOVA_HOST", required=True, secret=False, default=SAMBANOVA_DEFAULT_HOST),
                ConfigKey("SAMBANOVA_BASE_PATH", required=True, secret=False, default=SAMBANOVA_DEFAULT_BASE_PATH),
                ConfigKey("SAMBANOVA_CUSTOM_HEADERS", required=False, secret=True, default=None),
                ConfigKey("SAMBANOVA_TIMEOUT", required=False, secret=False, default=str(DEFAULT_REQUEST_TIMEOUT_SECONDS)),
            ),
        )

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def settings(self) -> ProviderSettings:
        return self._settings

    def get_model_config(self) -> ModelConfig:
        return self._model

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool],
    ) -> Tuple[Message, ProviderUsage]:
        """Run one chat completion against SambaNova.

        Returns:
            ``(assistant_message, ProviderUsage)``; usage is zero when the
            response carries no ``usage`` object.

        Raises:
            ConfigError: Host/base path cannot form a valid URL.
            RequestFailedError: Transport error, non-2xx status or an
                undecodable body.
            ProviderError: ``validation`` code for duplicate tool names.
        """
        ctx = LogContext(provider=self.provider_name, model=self._model.model_name)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            messages=len(messages),
            has_tools=bool(tools),
            temperature=self._model.temperature,
            max_tokens=self._model.max_tokens,
        )
        t0 = time.perf_counter()
        try:
            payload = create_request(
                self._model, system, messages, tools, ImageFormat.OPENAI, provider=self.provider_name
            )
            response = await self._post(payload)
            message = response_to_message(response, provider=self.provider_name)
        except ProviderError as exc:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=exc.code.value,
                level=logging.WARNING,
                latency_ms=(time.perf_counter() - t0) * 1000.0,
                message=exc.message,
            )
            raise

        try:
            usage = get_usage(response)
        except UsageError as exc:
            self._logger.debug("Failed to get usage data: %s", exc.message)
            usage = Usage()
        model = get_model(response, self._model.model_name)
        emit_debug_trace(self._model, payload, response, usage, provider=self.provider_name)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            tokens=usage,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
            served_model=model,
        )
        return message, ProviderUsage(model=model, usage=usage)

    async def _post(self, payload: dict) -> dict:
        url = join_endpoint(self._settings.host, self._settings.base_path, provider=self.provider_name)
        try:
            response = await self._client.post(url, headers=self._settings.auth_headers(), json=payload)
        except httpx.HTTPError as exc:
            raise RequestFailedError(
                f"{type(exc).__name__}: {exc}",
                self.provider_name,
                model=self._model.model_name,
                code=classify_exception(exc),
                raw=exc,
            ) from exc
        return handle_response_openai_compat(
            response, provider=self.provider_name, model=self._model.model_name
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SambanovaProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return (
            f"SambanovaProvider(model={self._model.model_name!r}, host={self._settings.host!r}, "
            f"base_path={self._settings.base_path!r})"
        )


def _parse_timeout(raw: Any, model_name: str) -> int:
    """Coerce the configured timeout to a positive integer number of seconds."""
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"SAMBANOVA_TIMEOUT must be an integer number of seconds, got {raw!r}",
            PROVIDER_NAME,
            model=model_name,
            raw=exc,
        ) from exc
    if value <= 0:
        raise ConfigError(f"SAMBANOVA_TIMEOUT must be positive, got {value}", PROVIDER_NAME, model=model_name)
    return value


__all__ = ["SambanovaProvider", "PROVIDER_NAME"]
