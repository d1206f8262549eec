"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``llmclient.base.models_parts`` to keep a stable import path.
"""

from .models_parts.content_part import (
    ContentPart,
    ImageBase64Part,
    ImageDetail,
    ImageURLPart,
    TextPart,
    image_part,
)
from .models_parts.message import Message, Role, ROLES
from .models_parts.chat_request import Request
from .models_parts.chat_response import Response, StreamResponse
from .models_parts.stream_chunk import StreamCallback, StreamChunk

__all__ = [
    "ContentPart",
    "TextPart",
    "ImageURLPart",
    "ImageBase64Part",
    "ImageDetail",
    "image_part",
    "Message",
    "Role",
    "ROLES",
    "Request",
    "Response",
    "StreamResponse",
    "StreamChunk",
    "StreamCallback",
]
