"""Generic strategy for any OpenAI-compatible chat completions URL."""

from __future__ import annotations

import httpx

from ..base.models import Request
from ..base.openai_style_parts import BaseOpenAIStyleStrategy, StrategyInit


class GenericStrategy(BaseOpenAIStyleStrategy):
    """Posts to an arbitrary absolute URL, sending the key when present."""

    provider_name = "generic"

    @classmethod
    def for_url(cls, url: str, request: Request, http_client: httpx.Client) -> "GenericStrategy":
        return cls(
            StrategyInit(
                endpoint=url,
                model=request.model,
                http_client=http_client,
                api_key=request.api_key,
                sampling=request.sampling_params(),
            )
        )


__all__ = ["GenericStrategy"]
