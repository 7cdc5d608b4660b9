"""
Structured content block model for chat messages.

This module defines the `ContentPart` dataclass and its associated
`ContentPartType` literal. A message is an ordered sequence of parts: plain
text, inline images, tool requests emitted by the assistant, and tool
responses supplied by the host. Parts are immutable; builders return new
instances.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",           # Plain text content
    "image",          # Base64 image payload with mime type
    "tool_request",   # Assistant asks the host to call a tool
    "tool_response",  # Host reports a tool result back to the model
]


@dataclass(frozen=True)
class ContentPart:
    """A single role-agnostic content block.

    Attributes:
        type: The semantic kind of the part.
        text: Text for ``text`` parts and the output of ``tool_response`` parts.
        data: Structured payload for non-text parts. Keys by type:
            ``image``: ``data``, ``mime_type``;
            ``tool_request``: ``id``, ``name``, ``arguments`` or ``error``;
            ``tool_response``: ``id``, ``is_error``.
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def text_part(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    @classmethod
    def image_part(cls, data: str, mime_type: str) -> "ContentPart":
        """Build an image part from base64 ``data`` (no data-URI prefix)."""
        return cls(type="image", data={"data": data, "mime_type": mime_type})

    @classmethod
    def tool_request(cls, id: str, name: str, arguments: Dict[str, Any]) -> "ContentPart":
        return cls(type="tool_request", data={"id": id, "name": name, "arguments": dict(arguments)})

    @classmethod
    def tool_request_error(cls, id: str, error: str, name: Optional[str] = None) -> "ContentPart":
        """Build a tool request the model emitted but that could not be decoded."""
        return cls(type="tool_request", data={"id": id, "name": name, "error": error})

    @classmethod
    def tool_response(cls, id: str, output: str, *, is_error: bool = False) -> "ContentPart":
        return cls(type="tool_response", text=output, data={"id": id, "is_error": is_error})

    @property
    def tool_id(self) -> Optional[str]:
        """Return the tool call id for tool parts, ``None`` otherwise."""
        if self.type in ("tool_request", "tool_response") and self.data:
            return self.data.get("id")
        return None

    @property
    def error(self) -> Optional[str]:
        """Return the decode error carried by a failed tool request."""
        if self.type == "tool_request" and self.data:
            return self.data.get("error")
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the object."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
