"""Initialization dataclass for OpenAI-compatible strategies.

Pure data container; no I/O occurs here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx


@dataclass(frozen=True)
class StrategyInit:
    """Initialization bundle for ``BaseOpenAIStyleStrategy``.

    Attributes:
        endpoint: Chat completions URL.
        model: Model identifier placed in every payload.
        http_client: Shared client owned by the caller.
        api_key: Bearer token; ``None`` or empty sends no Authorization header.
        sampling: Optional payload fields (``temperature``, ``max_tokens``,
            ``seed``) sent when present.
    """

    endpoint: str
    model: str
    http_client: httpx.Client
    api_key: Optional[str] = None
    sampling: Dict[str, Any] = field(default_factory=dict)


__all__ = ["StrategyInit"]
