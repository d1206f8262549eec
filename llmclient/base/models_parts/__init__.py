"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`llmclient.base.models_parts` if needed, while `llmclient.base.models`
remains the primary stable import path.
"""

from .content_part import ContentPart, ImageBase64Part, ImageDetail, ImageURLPart, TextPart
from .message import Message, Role
from .chat_request import Request
from .chat_response import Response, StreamResponse
from .stream_chunk import StreamCallback, StreamChunk

__all__ = [
    "ContentPart",
    "TextPart",
    "ImageURLPart",
    "ImageBase64Part",
    "ImageDetail",
    "Message",
    "Role",
    "Request",
    "Response",
    "StreamResponse",
    "StreamChunk",
    "StreamCallback",
]
