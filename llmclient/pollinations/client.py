"""Pollinations strategy.

Buffered calls go to ``https://gen.pollinations.ai/v1/chat/completions``.
Streaming with a key uses the same URL; streaming without one falls back to
the public keyless endpoint. An explicit endpoint override wins in both
cases. ``seed`` is forwarded when set.
"""

from __future__ import annotations

import httpx

from ..base.constants import POLLINATIONS_CHAT_URL, POLLINATIONS_FREE_CHAT_URL
from ..base.models import Request
from ..base.openai_style_parts import BaseOpenAIStyleStrategy, StrategyInit


class PollinationsStrategy(BaseOpenAIStyleStrategy):
    provider_name = "pollinations"

    def __init__(self, init: StrategyInit, *, endpoint_overridden: bool = False) -> None:
        super().__init__(init)
        self._endpoint_overridden = endpoint_overridden

    def _stream_endpoint(self) -> str:
        if self._api_key or self._endpoint_overridden:
            return self._endpoint
        return POLLINATIONS_FREE_CHAT_URL

    @classmethod
    def from_request(cls, request: Request, http_client: httpx.Client) -> "PollinationsStrategy":
        return cls(
            StrategyInit(
                endpoint=request.endpoint or POLLINATIONS_CHAT_URL,
                model=request.model,
                http_client=http_client,
                api_key=request.api_key,
                sampling=request.sampling_params(),
            ),
            endpoint_overridden=bool(request.endpoint),
        )


__all__ = ["PollinationsStrategy"]
