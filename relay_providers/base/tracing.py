"""Debug trace emission for provider calls.

Every completion ends with a DEBUG-level ``debug.trace`` event carrying the
request payload, the raw response body and the decoded usage. The event is
skipped entirely unless DEBUG is enabled for the ``providers`` logger
(``PROVIDERS_LOG_LEVEL=DEBUG``).

Failures while serializing or writing the trace are reported as a warning and
never reach the caller; the completion result is returned unchanged.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .logging import LogContext, get_logger, log_event
from .models import ModelConfig, Usage


def emit_debug_trace(
    model_config: ModelConfig,
    payload: Mapping[str, Any],
    response: Mapping[str, Any],
    usage: Usage,
    *,
    provider: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Emit one structured trace of a request/response exchange.

    Parameters:
        model_config: Model configuration the request was built from.
        payload: JSON body sent to the vendor.
        response: Decoded JSON body received.
        usage: Usage extracted (or defaulted) from ``response``.
        provider: Provider id for the log context.
        logger: Logger to write to; defaults to ``providers.trace``.
    """
    logger = logger or get_logger("providers.trace")
    if not logger.isEnabledFor(logging.DEBUG):
        return
    ctx = LogContext(provider=provider, model=model_config.model_name)
    try:
        log_event(
            logger,
            "debug.trace",
            ctx,
            level=logging.DEBUG,
            model_config=model_config.to_dict(),
            input=payload,
            output=response,
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
            total_tokens=usage.total_tokens,
        )
    except Exception as exc:  # noqa: BLE001 - trace failures never reach the caller
        logger.warning("debug trace emission failed: %s", exc)


__all__ = ["emit_debug_trace"]
