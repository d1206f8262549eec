"""
StreamChunk DTO delivered to streaming callbacks.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class StreamChunk:
    """One decoded streaming event.

    A content chunk carries a non-empty ``content`` fragment; the terminal
    chunk has ``done=True`` and never carries content.
    """

    content: str = ""
    done: bool = False

    def __post_init__(self) -> None:
        if self.done and self.content:
            raise ValueError("terminal stream chunk cannot carry content")

    @classmethod
    def terminal(cls) -> "StreamChunk":
        return cls(done=True)


# A callback aborts the stream by raising; its exception propagates unchanged.
StreamCallback = Callable[[StreamChunk], None]


__all__ = ["StreamChunk", "StreamCallback"]
