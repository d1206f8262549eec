"""Audio transcription (Pollinations, OpenAI-compatible multipart upload)."""
from __future__ import annotations

import json
import os
from typing import Dict, Optional, Protocol, Tuple

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_TRANSCRIPTION_URL
from ..base.http import post_multipart
from ..base.lookup import LookupRegistry
from .models import TranscriptionRequest


class TranscriptionProvider(Protocol):
    def transcribe(
        self, request: TranscriptionRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[str, bytes]:
        ...


def form_fields(request: TranscriptionRequest) -> Dict[str, str]:
    """Return the non-file multipart fields; unset options are omitted."""
    fields: Dict[str, str] = {}
    if request.model:
        fields["model"] = request.model
    if request.language:
        fields["language"] = request.language
    if request.prompt:
        fields["prompt"] = request.prompt
    if request.response_format:
        fields["response_format"] = request.response_format
    if request.temperature is not None:
        fields["temperature"] = f"{request.temperature:.2f}"
    return fields


def transcription_text(body: bytes) -> str:
    """Return the JSON ``text`` field, or the whole body as text."""
    try:
        doc = json.loads(body)
    except ValueError:
        doc = None
    if isinstance(doc, dict) and isinstance(doc.get("text"), str) and doc["text"]:
        return doc["text"]
    return body.decode("utf-8", errors="replace")


class PollinationsTranscriptionProvider:
    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def transcribe(
        self, request: TranscriptionRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[str, bytes]:
        file_name = os.path.basename(request.file_name) or "audio"
        body = post_multipart(
            self._http,
            POLLINATIONS_TRANSCRIPTION_URL,
            files={"file": (file_name, request.file_data)},
            data=form_fields(request),
            api_key=request.api_key,
            provider="pollinations",
            model=request.model or None,
            cancel=cancel,
        )
        return transcription_text(body), body


TRANSCRIPTION_PROVIDERS: LookupRegistry[TranscriptionProvider] = LookupRegistry(
    "transcription", {"pollinations": PollinationsTranscriptionProvider}
)


__all__ = [
    "TranscriptionProvider",
    "PollinationsTranscriptionProvider",
    "TRANSCRIPTION_PROVIDERS",
    "form_fields",
    "transcription_text",
]
