"""Unit tests for cooperative cancellation tokens.

Covers:
- ``cancel`` / ``raise_if_cancelled`` with a reason
- Parent -> child cascading, including children linked after cancel
- Deadlines via ``with_timeout`` and ``remaining``
- A deadline caps the per-call httpx timeout
"""

from __future__ import annotations

import httpx
import pytest

from llmclient.base.cancellation import CancellationToken, CancelledError
from llmclient.base.http.transport import _call_timeout


def test_cancel_with_reason():
    token = CancellationToken()
    assert token.cancelled is False  # nosec B101
    token.raise_if_cancelled()
    token.cancel("user abort")
    token.cancel("second reason ignored")
    assert token.reason == "user abort"  # nosec B101
    with pytest.raises(CancelledError, match="user abort"):
        token.raise_if_cancelled()


def test_cascade_to_children():
    parent = CancellationToken()
    child = parent.child()
    grandchild = child.child()
    parent.cancel("shutdown")
    assert child.cancelled and grandchild.cancelled  # nosec B101
    assert grandchild.reason == "shutdown"  # nosec B101
    late = parent.child()
    assert late.cancelled  # nosec B101


def test_child_cancel_does_not_affect_parent():
    parent = CancellationToken()
    parent.child().cancel()
    assert parent.cancelled is False  # nosec B101


def test_deadline():
    expired = CancellationToken.with_timeout(0)
    assert expired.cancelled  # nosec B101
    assert expired.reason == "deadline exceeded"  # nosec B101
    assert expired.remaining() == 0.0  # nosec B101

    later = CancellationToken.with_timeout(60)
    remaining = later.remaining()
    assert remaining is not None and 0 < remaining <= 60  # nosec B101
    assert CancellationToken().remaining() is None  # nosec B101


def test_deadline_caps_call_timeout():
    assert _call_timeout(None) is httpx.USE_CLIENT_DEFAULT  # nosec B101
    assert _call_timeout(CancellationToken()) is httpx.USE_CLIENT_DEFAULT  # nosec B101
    capped = _call_timeout(CancellationToken.with_timeout(30))
    assert isinstance(capped, httpx.Timeout)  # nosec B101
    assert capped.read is not None and capped.read <= 30  # nosec B101


def test_cancelled_before_send_never_reaches_transport(make_client):
    from llmclient.base.models import Request

    client = make_client(lambda request: httpx.Response(200))
    token = CancellationToken()
    token.cancel()
    with pytest.raises(CancelledError):
        client.send(Request(provider="ollama", prompt="hi"), cancel=token)
    with pytest.raises(CancelledError):
        client.send_stream(Request(provider="ollama", prompt="hi"), lambda chunk: None, cancel=token)
    assert client.http_client.recorded == []  # nosec B101
