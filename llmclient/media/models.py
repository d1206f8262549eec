"""Request/response DTOs for media generation and transcription."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ImageRequest:
    """Text-to-image request.

    ``width``, ``height`` and ``seed`` are forwarded only when set.
    """

    provider: str
    prompt: str
    model: str = ""
    api_key: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    seed: Optional[int] = None


@dataclass
class ImageResponse:
    data: bytes


@dataclass
class AudioRequest:
    """Text-to-speech request."""

    provider: str
    prompt: str
    model: str = ""
    api_key: Optional[str] = None


@dataclass
class AudioResponse:
    data: bytes


@dataclass
class TranscriptionRequest:
    """Speech-to-text request carrying the audio file inline.

    Attributes:
        file_name: Name sent with the upload; only its base name is used.
        file_data: Raw audio bytes.
        temperature: Sent formatted with two decimals when set.
    """

    provider: str
    file_name: str
    file_data: bytes
    model: str = ""
    api_key: Optional[str] = None
    language: str = ""
    prompt: str = ""
    response_format: str = ""
    temperature: Optional[float] = None


@dataclass
class TranscriptionResponse:
    """Transcribed text plus the undecoded response body."""

    text: str
    raw: bytes = b""


__all__ = [
    "ImageRequest",
    "ImageResponse",
    "AudioRequest",
    "AudioResponse",
    "TranscriptionRequest",
    "TranscriptionResponse",
]
