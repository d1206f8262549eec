"""Image generation (Pollinations)."""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol
from urllib.parse import quote

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_IMAGE_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .models import ImageRequest

# Characters a URL path segment may carry unescaped.
PATH_SAFE = "$&+,;:=@"


def escape_path_segment(text: str) -> str:
    return quote(text, safe=PATH_SAFE)


class ImageProvider(Protocol):
    def generate(self, request: ImageRequest, *, cancel: Optional[CancellationToken] = None) -> bytes:
        ...


class PollinationsImageProvider:
    """GET ``/image/<prompt>`` returning the raw image bytes."""

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    @staticmethod
    def query_params(request: ImageRequest) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if request.model:
            params["model"] = request.model
        if request.width is not None:
            params["width"] = str(request.width)
        if request.height is not None:
            params["height"] = str(request.height)
        if request.seed is not None:
            params["seed"] = str(request.seed)
        return params

    def generate(self, request: ImageRequest, *, cancel: Optional[CancellationToken] = None) -> bytes:
        url = POLLINATIONS_IMAGE_URL + escape_path_segment(request.prompt)
        return get_bytes(
            self._http,
            url,
            request.api_key,
            params=self.query_params(request),
            provider="pollinations",
            cancel=cancel,
        )


IMAGE_PROVIDERS: LookupRegistry[ImageProvider] = LookupRegistry(
    "image", {"pollinations": PollinationsImageProvider}
)


__all__ = ["ImageProvider", "PollinationsImageProvider", "IMAGE_PROVIDERS", "escape_path_segment"]
