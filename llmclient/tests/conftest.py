"""Pytest configuration for the llmclient test suite.

Fixtures
- ``clean_env`` (autouse): removes provider environment variables and the
  config-file cache so results do not depend on the developer's shell.
- ``mock_http``: factory building an ``httpx.Client`` over ``MockTransport``
  that records every request it serves.
- ``make_client``: same, wrapped in an :class:`llmclient.Client` with a
  private provider registry.
- ``captured_logs``: JSON payloads emitted on the ``llmclient`` logger tree.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterator, List

import httpx
import pytest

from llmclient.base.http import close_all_clients
from llmclient.base.logging import BASE_LOGGER_NAME, get_logger
from llmclient.base.registry import ProviderRegistry
from llmclient.client import Client
from llmclient.config import reset_config_cache

_PROVIDERS = ("OLLAMA", "POLLINATIONS", "OPENROUTER", "MYPROV")
_FIELDS = ("API_KEY", "MODEL", "ENDPOINT")
_GLOBAL_ENV = (
    "LLMCLIENT_CONFIG_FILE",
    "LLMCLIENT_LOG_LEVEL",
    "LLMCLIENT_HTTP_TIMEOUT_SECONDS",
    "LLMCLIENT_CONNECT_TIMEOUT_SECONDS",
    "LLMCLIENT_STREAM_READ_TIMEOUT_SECONDS",
)

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """``MockTransport`` that keeps the requests it handled."""

    def __init__(self, handler: Handler) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for provider in _PROVIDERS:
        for field in _FIELDS:
            monkeypatch.delenv(f"{provider}_{field}", raising=False)
    for name in _GLOBAL_ENV:
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def mock_http() -> Iterator[Callable[[Handler], httpx.Client]]:
    """Yield a factory producing mock-backed ``httpx.Client`` instances."""
    created: List[httpx.Client] = []

    def factory(handler: Handler) -> httpx.Client:
        transport = RecordingTransport(handler)
        client = httpx.Client(transport=transport)
        client.recorded = transport.requests  # type: ignore[attr-defined]
        created.append(client)
        return client

    yield factory
    for client in created:
        client.close()


@pytest.fixture()
def make_client(mock_http: Callable[[Handler], httpx.Client]) -> Callable[[Handler], Client]:
    """Return a factory for ``Client`` objects over a mock transport."""

    def factory(handler: Handler) -> Client:
        return Client(mock_http(handler), registry=ProviderRegistry())

    return factory


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.payloads: List[Dict[str, Any]] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            return
        if isinstance(payload, dict):
            payload.setdefault("_level", record.levelno)
            self.payloads.append(payload)


@pytest.fixture()
def captured_logs() -> Iterator[List[Dict[str, Any]]]:
    base = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield handler.payloads
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)

