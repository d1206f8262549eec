"""
Response DTOs for buffered and streamed chat calls.

``raw`` keeps the undecoded body of a buffered call for diagnostics and is
excluded from ``to_dict`` so large payloads are not logged by accident.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Response:
    """Result of a buffered chat call."""

    content: str
    raw: Optional[bytes] = None
    provider: Optional[str] = None
    model: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "provider": self.provider, "model": self.model}


@dataclass
class StreamResponse:
    """Aggregated text of a streamed chat call.

    Attributes:
        content: All non-terminal chunk contents concatenated in arrival order.
        chunks: Number of content chunks delivered to the callback.
        done: Whether the provider sent the terminal ``[DONE]`` sentinel.
    """

    content: str
    chunks: int = 0
    done: bool = False


__all__ = ["Response", "StreamResponse"]
