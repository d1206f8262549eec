"""Callback wrapper that aggregates streamed text."""
from __future__ import annotations

from typing import List

from ..models import StreamCallback, StreamChunk, StreamResponse


class StreamAccumulator:
    """Forward chunks to a user callback while collecting their content.

    Content is recorded before the callback runs, so a chunk whose callback
    raises is still part of :attr:`content`.
    """

    def __init__(self, callback: StreamCallback) -> None:
        self._callback = callback
        self._parts: List[str] = []
        self.chunks = 0
        self.done = False

    def __call__(self, chunk: StreamChunk) -> None:
        if chunk.done:
            self.done = True
        else:
            self._parts.append(chunk.content)
            self.chunks += 1
        self._callback(chunk)

    @property
    def content(self) -> str:
        return "".join(self._parts)

    def response(self) -> StreamResponse:
        return StreamResponse(content=self.content, chunks=self.chunks, done=self.done)


__all__ = ["StreamAccumulator"]
