"""Tests for image, speech and transcription collaborators.

Covers:
- Prompt escaping into the URL path and optional query parameters
- Bearer header only when a key is configured
- Multipart transcription fields (file name, two-decimal temperature)
- Transcription text from JSON or plain bodies
- Unknown media providers
"""

from __future__ import annotations

import httpx
import pytest

from llmclient.base.registry import UnknownProviderError
from llmclient.media import AudioRequest, ImageRequest, TranscriptionRequest
from llmclient.media.image import escape_path_segment
from llmclient.media.transcription import form_fields, transcription_text


def test_escape_path_segment():
    assert escape_path_segment("a cat/dog?") == "a%20cat%2Fdog%3F"  # nosec B101
    assert escape_path_segment("x=1&y") == "x=1&y"  # nosec B101
    assert escape_path_segment("red, blue; green") == "red,%20blue;%20green"  # nosec B101


def test_generate_image(make_client):
    client = make_client(lambda request: httpx.Response(200, content=b"\x89PNG..."))
    req = ImageRequest(provider="pollinations", prompt="a cat", model="flux", width=512, height=256, seed=3)
    resp = client.generate_image(req)
    sent = client.http_client.recorded[0]
    assert resp.data == b"\x89PNG..."  # nosec B101
    assert str(sent.url).startswith("https://gen.pollinations.ai/image/a%20cat?")  # nosec B101
    assert dict(sent.url.params) == {"model": "flux", "width": "512", "height": "256", "seed": "3"}  # nosec B101
    assert "authorization" not in sent.headers  # nosec B101


def test_generate_image_uses_configured_key(make_client, monkeypatch):
    monkeypatch.setenv("POLLINATIONS_API_KEY", "img-key")
    client = make_client(lambda request: httpx.Response(200, content=b"img"))
    client.generate_image(ImageRequest(provider="pollinations", prompt="sunset"))
    sent = client.http_client.recorded[0]
    assert sent.headers["authorization"] == "Bearer img-key"  # nosec B101
    assert sent.url.query == b""  # nosec B101


def test_generate_audio(make_client):
    client = make_client(lambda request: httpx.Response(200, content=b"ID3"))
    resp = client.generate_audio(AudioRequest(provider="pollinations", prompt="hello there", model="openai-audio"))
    sent = client.http_client.recorded[0]
    assert resp.data == b"ID3"  # nosec B101
    assert str(sent.url).startswith("https://gen.pollinations.ai/audio/hello%20there")  # nosec B101
    assert sent.url.params["model"] == "openai-audio"  # nosec B101


def test_form_fields_omit_unset_and_format_temperature():
    req = TranscriptionRequest(provider="pollinations", file_name="a.wav", file_data=b"", language="en", temperature=0.2)
    assert form_fields(req) == {"language": "en", "temperature": "0.20"}  # nosec B101


def test_transcribe_audio_multipart(make_client):
    client = make_client(lambda request: httpx.Response(200, json={"text": "hello world"}))
    req = TranscriptionRequest(
        provider="pollinations",
        file_name="/tmp/rec/clip.wav",
        file_data=b"RIFF....",
        model="whisper",
        temperature=0.5,
        api_key="k",
    )
    resp = client.transcribe_audio(req)
    sent = client.http_client.recorded[0]
    assert resp.text == "hello world"  # nosec B101
    assert str(sent.url) == "https://gen.pollinations.ai/v1/audio/transcriptions"  # nosec B101
    assert sent.headers["content-type"].startswith("multipart/form-data")  # nosec B101
    assert b'filename="clip.wav"' in sent.content  # nosec B101
    assert b"0.50" in sent.content  # nosec B101
    assert b"whisper" in sent.content  # nosec B101


def test_transcription_text_fallbacks():
    assert transcription_text(b'{"text": "hi"}') == "hi"  # nosec B101
    assert transcription_text(b"plain words") == "plain words"  # nosec B101
    assert transcription_text(b'{"text": ""}') == '{"text": ""}'  # nosec B101


def test_unknown_media_provider(make_client):
    client = make_client(lambda request: httpx.Response(200))
    with pytest.raises(UnknownProviderError, match="unknown image provider: nope"):
        client.generate_image(ImageRequest(provider="nope", prompt="x"))
    with pytest.raises(UnknownProviderError, match="unknown transcription provider: nope"):
        client.transcribe_audio(TranscriptionRequest(provider="nope", file_name="a", file_data=b""))
