"""Tests for the one-shot helpers and their keyword options.

Covers:
- ``RequestOptions`` validation (unknown keys, ranges) and ``apply``
- ``send`` / ``send_messages`` / ``send_with_images`` / ``send_stream``
- Media and account helpers routed through an injected client
"""

from __future__ import annotations

from typing import List

import httpx
import pytest
from pydantic import ValidationError

import llmclient
from llmclient.base.dto import RequestOptions
from llmclient.base.models import Message, Request, StreamChunk

from .utils import chat_body, json_response, request_json, sse_body


def test_request_options_apply():
    req = RequestOptions(temperature=0.3, seed=1, endpoint="http://x/v1").apply(Request(provider="ollama"))
    assert (req.temperature, req.seed, req.endpoint) == (0.3, 1, "http://x/v1")  # nosec B101
    assert req.max_tokens is None  # nosec B101


def test_request_options_validation():
    with pytest.raises(ValidationError):
        RequestOptions(temprature=0.3)
    with pytest.raises(ValidationError):
        RequestOptions(max_tokens=0)
    with pytest.raises(ValidationError):
        RequestOptions(temperature=-1)


def test_send(make_client):
    client = make_client(lambda request: httpx.Response(200, content=chat_body("4")))
    out = llmclient.send("ollama", "llama3", "2+2?", client=client, system_prompt="math", seed=9)
    body = request_json(client.http_client.recorded[0])
    assert out == "4"  # nosec B101
    assert body["seed"] == 9  # nosec B101
    assert body["messages"][0]["content"] == "math"  # nosec B101


def test_send_rejects_unknown_option(make_client):
    client = make_client(lambda request: httpx.Response(200, content=chat_body("x")))
    with pytest.raises(ValidationError):
        llmclient.send("ollama", "m", "hi", client=client, colour="blue")
    assert client.http_client.recorded == []  # nosec B101


def test_send_messages_and_images(make_client):
    client = make_client(lambda request: httpx.Response(200, content=chat_body("seen")))
    history = [Message(role="user", content="a"), Message(role="assistant", content="b"), Message(role="user", content="c")]
    assert llmclient.send_messages("ollama", "m", history, client=client) == "seen"  # nosec B101
    assert llmclient.send_with_images("ollama", "m", "describe", ["https://i/x.png"], client=client) == "seen"  # nosec B101
    first = request_json(client.http_client.recorded[0])
    second = request_json(client.http_client.recorded[1])
    assert len(first["messages"]) == 3  # nosec B101
    assert second["messages"][0]["content"][1]["image_url"]["url"] == "https://i/x.png"  # nosec B101


def test_send_stream(make_client):
    client = make_client(lambda request: httpx.Response(200, content=sse_body("a", "b")))
    seen: List[StreamChunk] = []
    result = llmclient.send_stream("ollama", "m", "hi", seen.append, client=client)
    assert result.content == "ab"  # nosec B101
    assert len(seen) == 3  # nosec B101


def test_media_and_account_helpers(make_client):
    def route(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.startswith("/image/"):
            return httpx.Response(200, content=b"img")
        if path == "/text/models":
            return json_response([{"name": "openai"}])
        if path == "/account/balance":
            return json_response({"credits": 2})
        return httpx.Response(404, content=b"missing")

    client = make_client(route)
    assert llmclient.generate_image("pollinations", "cat", width=10, client=client) == b"img"  # nosec B101
    assert [m.name for m in llmclient.list_text_models("pollinations", client=client)] == ["openai"]  # nosec B101
    assert llmclient.get_balance("pollinations", client=client).credits == 2  # nosec B101
    with pytest.raises(llmclient.APIStatusError):
        llmclient.get_profile("pollinations", client=client)
