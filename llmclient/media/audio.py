"""Speech generation (Pollinations)."""
from __future__ import annotations

from typing import Optional, Protocol

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_AUDIO_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .image import escape_path_segment
from .models import AudioRequest


class AudioProvider(Protocol):
    def generate(self, request: AudioRequest, *, cancel: Optional[CancellationToken] = None) -> bytes:
        ...


class PollinationsAudioProvider:
    """GET ``/audio/<prompt>`` returning the raw audio bytes."""

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def generate(self, request: AudioRequest, *, cancel: Optional[CancellationToken] = None) -> bytes:
        url = POLLINATIONS_AUDIO_URL + escape_path_segment(request.prompt)
        params = {"model": request.model} if request.model else None
        return get_bytes(self._http, url, request.api_key, params=params, provider="pollinations", cancel=cancel)


AUDIO_PROVIDERS: LookupRegistry[AudioProvider] = LookupRegistry(
    "audio", {"pollinations": PollinationsAudioProvider}
)


__all__ = ["AudioProvider", "PollinationsAudioProvider", "AUDIO_PROVIDERS"]
