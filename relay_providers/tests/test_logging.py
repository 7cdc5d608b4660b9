"""Focused tests for relay_providers.base.logging.

Covers:
- _parse_level string parsing
- JsonFormatter output for plain and JSON messages
- normalized_log_event canonical keys and token coercion
- debug trace emission gating and failure containment
"""
from __future__ import annotations

import json
import logging

from relay_providers.base.log_support import JsonFormatter, LogContext
from relay_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    get_logger,
    log_event,
    normalized_log_event,
)
from relay_providers.base.models import ModelConfig, Usage
from relay_providers.base.tracing import emit_debug_trace


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_and_propagates():
    logger = get_logger("unit.prefix")
    assert logger.name == "providers.unit.prefix"  # nosec B101
    assert logger.propagate is True  # nosec B101
    base = get_logger()
    assert base.name == "providers"  # nosec B101
    assert base.propagate is False  # nosec B101


def test_log_level_follows_environment(monkeypatch):
    monkeypatch.setenv("PROVIDERS_LOG_LEVEL", "ERROR")
    assert get_logger().level == logging.ERROR  # nosec B101
    monkeypatch.delenv("PROVIDERS_LOG_LEVEL")
    assert get_logger().level == logging.INFO  # nosec B101


def test_normalized_log_event_emits_required_keys(capture_logs):
    logger = get_logger("providers.test.normalized")
    handler = capture_logs("providers.test.normalized")

    normalized_log_event(
        logger,
        "chat.end",
        LogContext(provider="p", model="m"),
        phase="finalize",
        error_code="timeout",
        tokens=Usage(1, 2, 3),
        attempt=1,
        skipped=None,
    )

    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["event"] == "chat.end"  # nosec B101
    assert payload["provider"] == "p" and payload["model"] == "m"  # nosec B101
    assert payload["tokens"] == {"input_tokens": 1, "output_tokens": 2, "total_tokens": 3}  # nosec B101
    assert payload["attempt"] == 1  # nosec B101
    assert "skipped" not in payload  # nosec B101


def test_normalized_log_event_keeps_null_tokens_and_drops_null_error_code(capture_logs):
    logger = get_logger("providers.test.nulls")
    handler = capture_logs("providers.test.nulls")

    normalized_log_event(logger, "chat.start", None, phase="start")

    payload = json.loads(handler.messages[-1])
    assert payload["tokens"] is None  # nosec B101
    assert "error_code" not in payload  # nosec B101


def test_log_event_skips_disabled_levels(capture_logs):
    logger = get_logger("providers.test.levels")
    handler = capture_logs("providers.test.levels")

    log_event(logger, "quiet", level=logging.DEBUG)
    log_event(logger, "loud", level=logging.WARNING, detail="x")

    assert [json.loads(m)["event"] for m in handler.messages] == ["loud"]  # nosec B101


def test_json_formatter_hoists_json_messages():
    formatter = JsonFormatter()
    record = logging.LogRecord("providers.x", logging.INFO, __file__, 1, '{"event": "chat.end", "phase": "finalize"}', None, None)
    out = json.loads(formatter.format(record))
    assert out["event"] == "chat.end"  # nosec B101
    assert out["phase"] == "finalize"  # nosec B101
    assert out["level"] == "INFO"  # nosec B101

    plain = logging.LogRecord("providers.x", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    assert json.loads(formatter.format(plain))["msg"] == "hello world"  # nosec B101


def test_debug_trace_silent_at_info(capture_logs):
    logger = get_logger("providers.test.trace_info")
    handler = capture_logs("providers.test.trace_info")

    emit_debug_trace(ModelConfig.new("m"), {"a": 1}, {"b": 2}, Usage(), logger=logger)

    assert handler.messages == []  # nosec B101


def test_debug_trace_emits_when_debug_enabled(monkeypatch, capture_logs):
    monkeypatch.setenv("PROVIDERS_LOG_LEVEL", "DEBUG")
    logger = get_logger("providers.test.trace_debug")
    handler = capture_logs("providers.test.trace_debug")

    emit_debug_trace(ModelConfig.new("m"), {"a": 1}, {"b": 2}, Usage(3, 4, 7), provider="sambanova", logger=logger)

    payload = json.loads(handler.messages[-1])
    assert payload["event"] == "debug.trace"  # nosec B101
    assert payload["input"] == {"a": 1}  # nosec B101
    assert payload["output"] == {"b": 2}  # nosec B101
    assert payload["total_tokens"] == 7  # nosec B101
    assert payload["model_config"]["model_name"] == "m"  # nosec B101
    monkeypatch.delenv("PROVIDERS_LOG_LEVEL")
    get_logger()


def test_debug_trace_failure_is_contained(monkeypatch, capture_logs):
    monkeypatch.setenv("PROVIDERS_LOG_LEVEL", "DEBUG")
    logger = get_logger("providers.test.trace_fail")
    handler = capture_logs("providers.test.trace_fail")

    # tuple keys cannot be JSON encoded
    emit_debug_trace(ModelConfig.new("m"), {("a", "b"): 1}, {}, Usage(), logger=logger)

    assert any("debug trace emission failed" in m for m in handler.messages)  # nosec B101
    monkeypatch.delenv("PROVIDERS_LOG_LEVEL")
    get_logger()
