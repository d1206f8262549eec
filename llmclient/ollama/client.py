"""Ollama strategy.

Targets the local daemon's OpenAI-compatible endpoint (default
``http://localhost:11434/v1/chat/completions``). Ollama needs no credential:
any key on the request is ignored and never sent. Buffered payloads carry an
explicit ``"stream": false``.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..base.constants import OLLAMA_DEFAULT_URL
from ..base.models import Request
from ..base.openai_style_parts import BaseOpenAIStyleStrategy, StrategyInit


class OllamaStrategy(BaseOpenAIStyleStrategy):
    provider_name = "ollama"
    send_stream_flag_when_buffered = True

    def _wire_key(self) -> Optional[str]:
        return None

    @classmethod
    def from_request(cls, request: Request, http_client: httpx.Client) -> "OllamaStrategy":
        return cls(
            StrategyInit(
                endpoint=request.endpoint or OLLAMA_DEFAULT_URL,
                model=request.model,
                http_client=http_client,
                sampling=request.sampling_params(),
            )
        )


__all__ = ["OllamaStrategy"]
