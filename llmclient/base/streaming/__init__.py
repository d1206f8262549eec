"""Streaming primitives: SSE decoding and chunk accumulation."""

from .accumulator import StreamAccumulator
from .sse import decode_stream, extract_delta, iter_data_payloads, iter_stream_chunks

__all__ = [
    "StreamAccumulator",
    "decode_stream",
    "extract_delta",
    "iter_data_payloads",
    "iter_stream_chunks",
]
