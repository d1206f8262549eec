"""Media collaborators: image and speech generation, transcription.

These sit beside the chat core; they share the transport primitive and the
caller's ``httpx.Client`` but never touch dispatch, assembly or streaming.
"""

from .audio import AUDIO_PROVIDERS, AudioProvider, PollinationsAudioProvider
from .image import IMAGE_PROVIDERS, ImageProvider, PollinationsImageProvider
from .models import (
    AudioRequest,
    AudioResponse,
    ImageRequest,
    ImageResponse,
    TranscriptionRequest,
    TranscriptionResponse,
)
from .transcription import (
    TRANSCRIPTION_PROVIDERS,
    PollinationsTranscriptionProvider,
    TranscriptionProvider,
)

__all__ = [
    "ImageRequest",
    "ImageResponse",
    "AudioRequest",
    "AudioResponse",
    "TranscriptionRequest",
    "TranscriptionResponse",
    "ImageProvider",
    "AudioProvider",
    "TranscriptionProvider",
    "PollinationsImageProvider",
    "PollinationsAudioProvider",
    "PollinationsTranscriptionProvider",
    "IMAGE_PROVIDERS",
    "AUDIO_PROVIDERS",
    "TRANSCRIPTION_PROVIDERS",
]
