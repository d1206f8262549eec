"""
Provider-agnostic interfaces for the strategy layer.

A strategy is the per-provider unit dispatch resolves a request into. It is
constructed for a single call and owns no resources; the shared
``httpx.Client`` belongs to the caller.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Protocol, Sequence, runtime_checkable

import httpx

from .cancellation import CancellationToken
from .models import Message, Request, StreamCallback, StreamChunk


@runtime_checkable
class ProviderStrategy(Protocol):
    """Interface every chat strategy (built-in or registered) implements."""

    @property
    def provider_name(self) -> str:  # pragma: no cover - interface
        """Return the canonical provider name used in logs and errors."""
        ...

    @property
    def endpoint(self) -> str:  # pragma: no cover - interface
        """Return the chat completions URL this strategy posts to."""
        ...

    def send(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> str:  # pragma: no cover - interface
        """Perform one buffered chat call and return the extracted text."""
        ...

    def send_stream(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        callback: StreamCallback,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> int:  # pragma: no cover - interface
        """Stream a chat call into ``callback``; return delivered chunk count."""
        ...


@runtime_checkable
class SupportsChunkIteration(Protocol):
    """Optional capability: pull-style streaming as a chunk generator."""

    def iter_stream(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Iterator[StreamChunk]:  # pragma: no cover - interface
        ...


# Registered factories build a strategy from the request and the shared client.
StrategyFactory = Callable[[Request, httpx.Client], ProviderStrategy]


__all__ = ["ProviderStrategy", "SupportsChunkIteration", "StrategyFactory"]
