"""
OpenAI-compatible Chat Completions request encoder and response decoder.

Purpose:
- Translate provider-agnostic ``Message``/``Tool`` DTOs into the de facto
  OpenAI request shape shared by many inference vendors.
- Decode ``choices[0].message`` into an assistant ``Message`` and pull token
  usage and the served model id out of the response body.

External dependencies:
- None beyond the standard library; operates on already-decoded JSON.

Failure semantics:
- ``response_to_message`` raises :class:`RequestFailedError` (code
  ``decode``) when the body has no usable ``choices[0].message``.
- ``get_usage`` raises :class:`UsageError` only when the ``usage`` object is
  absent; individual counters that are missing or malformed become ``0``.
- Malformed tool calls do not fail the decode. They become tool-request parts
  carrying an error string so the host can report it back to the model.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..dto import Tool
from ..errors import ErrorCode, ProviderError, RequestFailedError, UsageError
from ..models import ContentPart, Message, ModelConfig, Usage
from .image_format import ImageFormat, convert_image

_DEFAULT_PROVIDER = "openai_compat"
_TOOL_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


def _tool_request_spec(part: ContentPart) -> Dict[str, Any]:
    data = part.data or {}
    return {
        "id": data.get("id"),
        "type": "function",
        "function": {
            "name": data.get("name"),
            "arguments": json.dumps(data.get("arguments") or {}),
        },
    }


def format_messages(messages: Sequence[Message], image_format: ImageFormat) -> List[Dict[str, Any]]:
    """Convert messages into OpenAI ``messages`` entries (system prompt excluded).

    Each message yields at most one role message (text, images, tool calls)
    followed by one ``role: tool`` entry per tool response it carries.
    """
    spec: List[Dict[str, Any]] = []
    for message in messages:
        texts: List[str] = []
        images: List[Dict[str, Any]] = []
        tool_calls: List[Dict[str, Any]] = []
        tool_messages: List[Dict[str, Any]] = []

        for part in message.content:
            if part.type == "text":
                if part.text:
                    texts.append(part.text)
            elif part.type == "image":
                images.append(convert_image(part, image_format))
            elif part.type == "tool_request":
                if part.error is not None:
                    # undecodable calls are replayed as text
                    texts.append(f"Error: {part.error}")
                else:
                    tool_calls.append(_tool_request_spec(part))
            elif part.type == "tool_response":
                data = part.data or {}
                output = part.text or ""
                tool_messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": data.get("id"),
                        "content": f"Error: {output}" if data.get("is_error") else output,
                    }
                )

        converted: Dict[str, Any] = {"role": message.role}
        text = "\n".join(texts)
        if images:
            parts: List[Dict[str, Any]] = [{"type": "text", "text": text}] if text else []
            converted["content"] = parts + images
        elif text:
            converted["content"] = text
        if tool_calls:
            converted["tool_calls"] = tool_calls
        if "content" in converted or tool_calls:
            spec.append(converted)
        spec.extend(tool_messages)
    return spec


def format_tools(tools: Sequence[Tool], *, provider: str = _DEFAULT_PROVIDER) -> List[Dict[str, Any]]:
    """Convert tool definitions into OpenAI ``function`` tool specs.

    Raises:
        ProviderError: ``validation`` code when two tools share a name.
    """
    seen = set()
    spec: List[Dict[str, Any]] = []
    for tool in tools:
        if tool.name in seen:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"Duplicate tool name: {tool.name}",
                provider=provider,
            )
        seen.add(tool.name)
        spec.append(
            {
                "type": "function",
                "function": {
                    "name": tool.name,
                    "description": tool.description,
                    "parameters": tool.input_schema,
                },
            }
        )
    return spec


def create_request(
    model_config: ModelConfig,
    system: str,
    messages: Sequence[Message],
    tools: Sequence[Tool],
    image_format: ImageFormat = ImageFormat.OPENAI,
    *,
    provider: str = _DEFAULT_PROVIDER,
) -> Dict[str, Any]:
    """Build the JSON body for a chat completion request.

    The system prompt is always the first message. ``tools``, ``temperature``
    and ``max_tokens`` are only present when supplied.
    """
    payload: Dict[str, Any] = {
        "model": model_config.model_name,
        "messages": [{"role": "system", "content": system}] + format_messages(messages, image_format),
    }
    if tools:
        payload["tools"] = format_tools(tools, provider=provider)
    if model_config.temperature is not None:
        payload["temperature"] = float(model_config.temperature)
    if model_config.max_tokens is not None:
        payload["max_tokens"] = int(model_config.max_tokens)
    return payload


def _decode_tool_call(tool_call: Any) -> ContentPart:
    """Decode one ``tool_calls`` entry, never raising."""
    if not isinstance(tool_call, Mapping):
        return ContentPart.tool_request_error("", f"Malformed tool call: {tool_call!r}")
    call_id = str(tool_call.get("id") or "")
    function = tool_call.get("function")
    if not isinstance(function, Mapping):
        return ContentPart.tool_request_error(call_id, "Tool call is missing its function block")
    name = str(function.get("name") or "")
    if not _TOOL_NAME_RE.match(name):
        return ContentPart.tool_request_error(
            call_id,
            f"The provided function name '{name}' had invalid characters, "
            f"it must match this regex [a-zA-Z0-9_-]+",
            name=name,
        )
    raw_args = function.get("arguments")
    if isinstance(raw_args, Mapping):
        return ContentPart.tool_request(call_id, name, dict(raw_args))
    if raw_args is None or (isinstance(raw_args, str) and not raw_args.strip()):
        return ContentPart.tool_request(call_id, name, {})
    try:
        arguments = json.loads(raw_args)
    except (TypeError, ValueError) as exc:
        return ContentPart.tool_request_error(
            call_id, f"Could not interpret tool use parameters for id {call_id}: {exc}", name=name
        )
    if not isinstance(arguments, dict):
        return ContentPart.tool_request_error(
            call_id, f"Tool use parameters for id {call_id} must be a JSON object", name=name
        )
    return ContentPart.tool_request(call_id, name, arguments)


def _content_text(content: Any) -> str:
    """Flatten ``message.content`` given either as a string or a list of parts."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks = []
        for item in content:
            if isinstance(item, Mapping) and item.get("type") == "text" and item.get("text"):
                chunks.append(str(item["text"]))
        return "".join(chunks)
    return ""


def response_to_message(response: Mapping[str, Any], *, provider: str = _DEFAULT_PROVIDER) -> Message:
    """Decode ``choices[0].message`` into an assistant :class:`Message`.

    Raises:
        RequestFailedError: ``decode`` code when ``choices`` is missing or empty
            or its first entry has no ``message`` object.
    """
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        raise RequestFailedError(
            "Response has no choices", provider, code=ErrorCode.DECODE
        )
    first = choices[0]
    original = first.get("message") if isinstance(first, Mapping) else None
    if not isinstance(original, Mapping):
        raise RequestFailedError(
            "Response choice has no message", provider, code=ErrorCode.DECODE
        )

    message = Message.assistant()
    text = _content_text(original.get("content"))
    if text:
        message = message.with_text(text)
    tool_calls = original.get("tool_calls") or []
    if isinstance(tool_calls, list):
        for tool_call in tool_calls:
            message = message.with_content(_decode_tool_call(tool_call))
    return message


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce to a non-negative ``int`` or ``None`` (bools rejected)."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return iv if iv >= 0 else None


def get_usage(response: Mapping[str, Any]) -> Usage:
    """Extract token usage from an OpenAI-compatible response body.

    Accepts ``prompt_tokens``/``completion_tokens`` and the
    ``input_tokens``/``output_tokens`` spellings. ``total_tokens`` is derived
    from the parts when the vendor omits it.

    Raises:
        UsageError: When the body carries no ``usage`` object.
    """
    usage = response.get("usage")
    if not isinstance(usage, Mapping):
        raise UsageError("No usage data in response")
    prompt = _coerce_int(usage.get("prompt_tokens", usage.get("input_tokens")))
    completion = _coerce_int(usage.get("completion_tokens", usage.get("output_tokens")))
    total = _coerce_int(usage.get("total_tokens"))
    if total is None:
        total = (prompt or 0) + (completion or 0)
    return Usage(input_tokens=prompt or 0, output_tokens=completion or 0, total_tokens=total)


def get_model(response: Mapping[str, Any], fallback: str) -> str:
    """Return the model id the vendor reports having served, else ``fallback``."""
    model = response.get("model")
    if isinstance(model, str) and model:
        return model
    return fallback


__all__ = [
    "format_messages",
    "format_tools",
    "create_request",
    "response_to_message",
    "get_usage",
    "get_model",
]
