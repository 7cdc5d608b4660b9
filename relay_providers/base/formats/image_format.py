"""Image encodings expected by different vendor request formats."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from ..models import ContentPart


class ImageFormat(str, Enum):
    """How inline images are embedded in a request body."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


def convert_image(part: ContentPart, image_format: ImageFormat) -> Dict[str, Any]:
    """Render an ``image`` content part in the requested vendor encoding.

    ``OPENAI`` produces an ``image_url`` part carrying a base64 data URI;
    ``ANTHROPIC`` produces an ``image`` part with a ``base64`` source block.
    """
    data = (part.data or {}).get("data", "")
    mime_type = (part.data or {}).get("mime_type", "image/png")
    if image_format is ImageFormat.ANTHROPIC:
        return {
            "type": "image",
            "source": {"type": "base64", "media_type": mime_type, "data": data},
        }
    return {
        "type": "image_url",
        "image_url": {"url": f"data:{mime_type};base64,{data}"},
    }


__all__ = ["ImageFormat", "convert_image"]
