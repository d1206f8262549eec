"""
llmclient base package

Provider-agnostic building blocks shared by every strategy:

- Models (DTOs): requests, responses, messages, content parts, stream chunks
- Transport: pooled ``httpx`` clients and the request helpers
- Message assembly, SSE decoding and content extraction
- Dispatch: the provider registry and strategy resolution
- Errors, cancellation, timeouts and structured logging
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    APIStatusError,
    ErrorCode,
    ExtractionError,
    ProviderError,
    ProviderReportedError,
    TransportError,
)
from .extraction import extract_content
from .interfaces import ProviderStrategy, StrategyFactory
from .models import (
    ContentPart,
    ImageBase64Part,
    ImageURLPart,
    Message,
    Request,
    Response,
    StreamCallback,
    StreamChunk,
    StreamResponse,
    TextPart,
)
from .registry import (
    ProviderRegistry,
    RegistrationHandle,
    UnknownProviderError,
    default_registry,
    register_provider,
    resolve_provider,
)
from .streaming import StreamAccumulator, decode_stream
from .timeouts import TimeoutConfig, get_timeout_config
from .utils.messages import assemble_messages

__all__ = [
    "CancellationToken",
    "CancelledError",
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "APIStatusError",
    "ExtractionError",
    "ProviderReportedError",
    "extract_content",
    "ProviderStrategy",
    "StrategyFactory",
    "ContentPart",
    "TextPart",
    "ImageURLPart",
    "ImageBase64Part",
    "Message",
    "Request",
    "Response",
    "StreamChunk",
    "StreamCallback",
    "StreamResponse",
    "ProviderRegistry",
    "RegistrationHandle",
    "UnknownProviderError",
    "default_registry",
    "register_provider",
    "resolve_provider",
    "StreamAccumulator",
    "decode_stream",
    "TimeoutConfig",
    "get_timeout_config",
    "assemble_messages",
]
