"""Wire formats shared by vendor adapters."""

from .image_format import ImageFormat, convert_image
from .openai import (
    create_request,
    format_messages,
    format_tools,
    get_model,
    get_usage,
    response_to_message,
)

__all__ = [
    "ImageFormat",
    "convert_image",
    "create_request",
    "format_messages",
    "format_tools",
    "get_model",
    "get_usage",
    "response_to_message",
]
