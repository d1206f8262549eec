"""Shared builders for canned provider responses used across test modules."""

from __future__ import annotations

import json
from typing import Any, Dict

import httpx


def sse_body(*deltas: str, done: bool = True) -> bytes:
    """Build an SSE body carrying one ``delta.content`` frame per fragment."""
    frames = ["data: " + json.dumps({"choices": [{"delta": {"content": d}}]}) + "\n\n" for d in deltas]
    if done:
        frames.append("data: [DONE]\n\n")
    return "".join(frames).encode("utf-8")


def chat_body(content: str) -> bytes:
    return json.dumps({"choices": [{"message": {"role": "assistant", "content": content}}]}).encode("utf-8")


def json_response(doc: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, content=json.dumps(doc).encode("utf-8"))


def request_json(request: httpx.Request) -> Dict[str, Any]:
    """Decode the JSON body of a recorded request."""
    return json.loads(request.content)
