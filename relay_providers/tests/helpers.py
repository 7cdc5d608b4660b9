"""Shared test helpers: log capture, a recording mock transport and canned bodies."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional

import httpx


class ListHandler(logging.Handler):
    """Capture log messages into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())

    def events(self) -> List[Dict[str, Any]]:
        """Return the messages that decode as JSON objects."""
        out = []
        for msg in self.messages:
            try:
                payload = json.loads(msg)
            except ValueError:
                continue
            if isinstance(payload, dict):
                out.append(payload)
        return out


class RecordingTransport(httpx.MockTransport):
    """``MockTransport`` that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def completion_body(
    text: str = "Hello there",
    *,
    model: Optional[str] = "Meta-Llama-3.1-405B-Instruct",
    usage: Optional[Dict[str, Any]] = None,
    tool_calls: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a minimal OpenAI-compatible chat completion response body."""
    message: Dict[str, Any] = {"role": "assistant", "content": text}
    if tool_calls is not None:
        message["tool_calls"] = tool_calls
    body: Dict[str, Any] = {
        "id": "cmpl-1",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": message}],
    }
    if model is not None:
        body["model"] = model
    if usage is not None:
        body["usage"] = usage
    return body
