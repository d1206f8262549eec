"""llmclient package

One client for OpenAI-compatible chat endpoints: Ollama, Pollinations,
OpenRouter, any bare chat-completions URL, and providers registered at
runtime. Also covers Pollinations media generation and account lookups.

Public API (re-exported):
    - Client: :class:`Client`
    - DTOs: :class:`Request`, :class:`Response`, :class:`Message`,
      :class:`StreamChunk`, :class:`StreamResponse`, content parts
    - Errors: :class:`ProviderError` and subclasses, :class:`ErrorCode`,
      :class:`UnknownProviderError`, :class:`CancelledError`
    - Registration: :func:`register_provider`, :class:`ProviderRegistry`
    - One-shot helpers from :mod:`llmclient.convenience`
"""

from .base import (
    APIStatusError,
    CancellationToken,
    CancelledError,
    ErrorCode,
    ExtractionError,
    ImageBase64Part,
    ImageURLPart,
    Message,
    ProviderError,
    ProviderRegistry,
    ProviderReportedError,
    ProviderStrategy,
    RegistrationHandle,
    Request,
    Response,
    StreamChunk,
    StreamResponse,
    TextPart,
    TransportError,
    UnknownProviderError,
    register_provider,
)
from .client import Client
from .convenience import (
    generate_audio,
    generate_image,
    get_balance,
    get_profile,
    get_usage,
    list_text_models,
    send,
    send_messages,
    send_stream,
    send_with_images,
    transcribe_audio,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Client",
    "Request",
    "Response",
    "Message",
    "TextPart",
    "ImageURLPart",
    "ImageBase64Part",
    "StreamChunk",
    "StreamResponse",
    "ProviderStrategy",
    "ProviderRegistry",
    "RegistrationHandle",
    "register_provider",
    "CancellationToken",
    "CancelledError",
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "APIStatusError",
    "ExtractionError",
    "ProviderReportedError",
    "UnknownProviderError",
    "send",
    "send_messages",
    "send_with_images",
    "send_stream",
    "generate_image",
    "generate_audio",
    "transcribe_audio",
    "list_text_models",
    "get_balance",
    "get_profile",
    "get_usage",
]
