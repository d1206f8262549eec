"""HTTP layer: pooled ``httpx`` clients and the transport primitive."""

from .client import close_all_clients, get_default_client, new_httpx_client
from .transport import (
    build_headers,
    get_bytes,
    post_json,
    post_multipart,
    request_bytes,
    stream_post_json,
)

__all__ = [
    "new_httpx_client",
    "get_default_client",
    "close_all_clients",
    "build_headers",
    "request_bytes",
    "post_json",
    "get_bytes",
    "post_multipart",
    "stream_post_json",
]
