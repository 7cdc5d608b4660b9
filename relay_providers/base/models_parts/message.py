"""
Message DTO used across providers.

Defines the immutable `Message` dataclass and the `Role` literal. The system
prompt is passed to adapters separately, so only ``user`` and ``assistant``
roles exist here; tool responses travel as ``user`` content parts. Builder
methods (``with_text`` and friends) return new messages and never mutate the
receiver, so adapters may read history concurrently without copying.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Literal, Tuple

from .content_part import ContentPart


Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A chat message made of ordered content parts.

    Attributes:
        role: Author role, ``"user"`` or ``"assistant"``.
        content: Ordered tuple of :class:`ContentPart` items.
        created: Unix timestamp (seconds). Excluded from equality so two
            decodes of the same payload compare equal.
    """

    role: Role
    content: Tuple[ContentPart, ...] = ()
    created: int = field(default_factory=lambda: int(time.time()), compare=False)

    @classmethod
    def user(cls) -> "Message":
        return cls(role="user")

    @classmethod
    def assistant(cls) -> "Message":
        return cls(role="assistant")

    def with_content(self, part: ContentPart) -> "Message":
        return replace(self, content=self.content + (part,))

    def with_text(self, text: str) -> "Message":
        return self.with_content(ContentPart.text_part(text))

    def with_image(self, data: str, mime_type: str) -> "Message":
        return self.with_content(ContentPart.image_part(data, mime_type))

    def with_tool_request(self, id: str, name: str, arguments: Dict[str, Any]) -> "Message":
        return self.with_content(ContentPart.tool_request(id, name, arguments))

    def with_tool_response(self, id: str, output: str, *, is_error: bool = False) -> "Message":
        return self.with_content(ContentPart.tool_response(id, output, is_error=is_error))

    def text(self) -> str:
        """Return the text parts joined with newlines (other parts skipped)."""
        return "\n".join(p.text for p in self.content if p.type == "text" and p.text)

    def tool_requests(self) -> List[ContentPart]:
        return [p for p in self.content if p.type == "tool_request"]

    def is_empty(self) -> bool:
        return not self.content

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "created": self.created,
            "content": [p.to_dict() for p in self.content],
        }


__all__ = [
    "Message",
    "Role",
]
