"""OpenRouter strategy.

Posts to ``https://openrouter.ai/api/v1/chat/completions``. The attribution
headers OpenRouter asks for are added by the transport for any URL on the
OpenRouter host, so this class only fixes the endpoint.
"""

from __future__ import annotations

import httpx

from ..base.constants import OPENROUTER_CHAT_URL
from ..base.models import Request
from ..base.openai_style_parts import BaseOpenAIStyleStrategy, StrategyInit


class OpenRouterStrategy(BaseOpenAIStyleStrategy):
    provider_name = "openrouter"

    @classmethod
    def from_request(cls, request: Request, http_client: httpx.Client) -> "OpenRouterStrategy":
        return cls(
            StrategyInit(
                endpoint=request.endpoint or OPENROUTER_CHAT_URL,
                model=request.model,
                http_client=http_client,
                api_key=request.api_key,
                sampling=request.sampling_params(),
            )
        )


__all__ = ["OpenRouterStrategy"]
