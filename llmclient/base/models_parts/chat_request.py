"""
Request DTO for provider-agnostic chat invocations.

A request names the provider (a registered name or a bare URL), the model and
either a single ``prompt`` or a full ``messages`` history. A prompt is sugar
for a one-element user history; when ``messages`` is non-empty it wins.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .message import Message


@dataclass
class Request:
    """Normalized chat request handed to provider dispatch.

    Attributes:
        provider: Provider identifier; built-in name, registered name or an
            absolute http(s) URL of an OpenAI-compatible endpoint.
        model: Target model identifier.
        api_key: Optional bearer token.
        endpoint: Optional explicit endpoint override.
        system_prompt: Optional system instruction, sent first.
        prompt: Single user prompt (ignored when ``messages`` is non-empty).
        messages: Full conversation history.
        images: Image URLs or ``data:`` URIs attached to the final user turn.
        temperature: Sampling temperature when supported by the provider.
        max_tokens: Maximum tokens for the completion.
        seed: Sampling seed.
    """

    provider: str
    model: str = ""
    api_key: Optional[str] = None
    endpoint: Optional[str] = None
    system_prompt: str = ""
    prompt: str = ""
    messages: List[Message] = field(default_factory=list)
    images: List[str] = field(default_factory=list)
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    seed: Optional[int] = None

    def history(self) -> List[Message]:
        """Return the active conversation history."""
        if self.messages:
            return list(self.messages)
        if self.prompt:
            return [Message(role="user", content=self.prompt)]
        return []

    def sampling_params(self) -> Dict[str, Any]:
        """Return the sampling controls that are set, keyed by wire name."""
        params: Dict[str, Any] = {}
        if self.temperature is not None:
            params["temperature"] = self.temperature
        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens
        if self.seed is not None:
            params["seed"] = self.seed
        return params

    def with_defaults(self, **defaults: Any) -> "Request":
        """Return a copy where empty fields take the given default values."""
        updates = {k: v for k, v in defaults.items() if v not in (None, "") and not getattr(self, k)}
        return replace(self, **updates) if updates else self


__all__ = [
    "Request",
]
