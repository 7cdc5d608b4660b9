"""HTTP utilities package for providers.

Exposes the async client builder, endpoint joining and response decoding.
"""

from .client import build_async_client, handle_response_openai_compat, join_endpoint

__all__ = ["build_async_client", "handle_response_openai_compat", "join_endpoint"]
