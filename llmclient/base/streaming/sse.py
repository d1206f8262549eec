"""Server-Sent Events decoding for OpenAI-compatible chat streams.

Frames look like ``data: {json}``; the literal ``data: [DONE]`` ends the
stream. Decoding is line based:

- each line is stripped; blank lines and lines without the ``data: `` prefix
  (comments, ``event:``/``id:`` fields, keep-alives) are ignored;
- ``[DONE]`` produces one terminal :class:`StreamChunk` and stops reading;
- otherwise the payload is parsed and ``choices[0].delta.content`` becomes a
  content chunk when non-empty;
- malformed payloads are skipped and the stream continues.

Reaching the end of input without ``[DONE]`` is a normal completion and
synthesizes no terminal chunk.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Iterator, Optional

from ..cancellation import CancellationToken
from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from ..logging import LogContext, normalized_log_event
from ..models import StreamCallback, StreamChunk

_MAX_LOGGED_PAYLOAD = 200


def iter_data_payloads(lines: Iterable[Any]) -> Iterator[str]:
    """Yield the payload of every ``data: `` line in ``lines``."""
    for raw in lines:
        line = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else str(raw)
        line = line.strip()
        if not line or not line.startswith(SSE_DATA_PREFIX):
            continue
        yield line[len(SSE_DATA_PREFIX):]


def _parse_delta(payload: str) -> Optional[str]:
    """Return ``choices[0].delta.content``; raise ``ValueError`` on bad JSON."""
    doc = json.loads(payload)
    if not isinstance(doc, dict):
        return None
    choices = doc.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    delta = choices[0].get("delta")
    if not isinstance(delta, dict):
        return None
    content = delta.get("content")
    return content if isinstance(content, str) else None


def extract_delta(payload: str) -> Optional[str]:
    """Return the text delta carried by one ``data:`` payload, if any.

    Malformed JSON and absent paths both yield ``None``.
    """
    try:
        return _parse_delta(payload)
    except ValueError:
        return None


def iter_stream_chunks(
    lines: Iterable[Any],
    cancel: Optional[CancellationToken] = None,
    *,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> Iterator[StreamChunk]:
    """Lazily decode ``lines`` into stream chunks.

    ``cancel`` is checked before each line is examined; a cancelled token
    raises ``CancelledError`` and no further chunks are produced.
    """
    for payload in iter_data_payloads(_checked(lines, cancel)):
        if payload == SSE_DONE_SENTINEL:
            yield StreamChunk.terminal()
            return
        try:
            content = _parse_delta(payload)
        except ValueError as exc:
            if logger is not None:
                normalized_log_event(
                    logger,
                    "stream.decode_error",
                    ctx,
                    phase="decode",
                    error_code="decode",
                    emitted=None,
                    level=logging.DEBUG,
                    error=str(exc),
                    payload=payload[:_MAX_LOGGED_PAYLOAD],
                )
            continue
        if content:
            yield StreamChunk(content=content)


def _checked(lines: Iterable[Any], cancel: Optional[CancellationToken]) -> Iterator[Any]:
    for line in lines:
        if cancel is not None:
            cancel.raise_if_cancelled()
        yield line


def decode_stream(
    lines: Iterable[Any],
    on_chunk: StreamCallback,
    *,
    cancel: Optional[CancellationToken] = None,
    logger: Optional[logging.Logger] = None,
    ctx: Optional[LogContext] = None,
) -> int:
    """Decode ``lines`` and deliver each chunk to ``on_chunk`` in order.

    An exception raised by ``on_chunk`` propagates unchanged and no further
    lines are read.

    Returns:
        The number of content chunks delivered (the terminal chunk excluded).
    """
    delivered = 0
    for chunk in iter_stream_chunks(lines, cancel, logger=logger, ctx=ctx):
        on_chunk(chunk)
        if not chunk.done:
            delivered += 1
    return delivered


__all__ = ["iter_data_payloads", "extract_delta", "iter_stream_chunks", "decode_stream"]
