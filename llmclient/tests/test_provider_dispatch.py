"""Unit tests for provider dispatch and the provider registry.

Covers:
- Built-in names (case and whitespace insensitive) and their default URLs
- Endpoint overrides for built-ins
- Bare URL identifiers and custom names with an endpoint URL
- Registered factories, last registration wins
- ``UnknownProviderError`` message carries the identifier as given
- Resolution is repeatable and performs no I/O
"""

from __future__ import annotations

import httpx
import pytest

from llmclient.base.constants import (
    OLLAMA_DEFAULT_URL,
    OPENROUTER_CHAT_URL,
    POLLINATIONS_CHAT_URL,
    POLLINATIONS_FREE_CHAT_URL,
)
from llmclient.base.interfaces import ProviderStrategy
from llmclient.base.models import Request
from llmclient.base.registry import ProviderRegistry, UnknownProviderError, resolve_provider
from llmclient.generic import GenericStrategy
from llmclient.ollama import OllamaStrategy
from llmclient.openrouter import OpenRouterStrategy
from llmclient.pollinations import PollinationsStrategy


def _no_network(request: httpx.Request) -> httpx.Response:  # pragma: no cover - must not be reached
    raise AssertionError(f"unexpected request to {request.url}")


@pytest.fixture()
def http():
    client = httpx.Client(transport=httpx.MockTransport(_no_network))
    yield client
    client.close()


class _Custom:
    provider_name = "custom"

    def __init__(self, request: Request) -> None:
        self.request = request

    @property
    def endpoint(self) -> str:
        return "custom://"

    def send(self, history, images, system_prompt, *, cancel=None) -> str:
        return "custom"

    def send_stream(self, history, images, system_prompt, callback, *, cancel=None) -> int:
        return 0


@pytest.mark.parametrize(
    "name, klass, url",
    [
        ("ollama", OllamaStrategy, OLLAMA_DEFAULT_URL),
        ("  Ollama ", OllamaStrategy, OLLAMA_DEFAULT_URL),
        ("POLLINATIONS", PollinationsStrategy, POLLINATIONS_CHAT_URL),
        ("openrouter", OpenRouterStrategy, OPENROUTER_CHAT_URL),
    ],
)
def test_builtins_resolve_to_default_urls(http, name, klass, url):
    strategy = resolve_provider(Request(provider=name, model="m"), http, ProviderRegistry())
    assert isinstance(strategy, klass)  # nosec B101
    assert strategy.endpoint == url  # nosec B101
    assert isinstance(strategy, ProviderStrategy)  # nosec B101


def test_builtin_honours_endpoint_override(http):
    req = Request(provider="ollama", model="m", endpoint="http://gpu-box:11434/v1/chat/completions")
    strategy = resolve_provider(req, http, ProviderRegistry())
    assert isinstance(strategy, OllamaStrategy)  # nosec B101
    assert strategy.endpoint == "http://gpu-box:11434/v1/chat/completions"  # nosec B101


def test_pollinations_stream_endpoint_depends_on_key(http):
    keyless = resolve_provider(Request(provider="pollinations"), http, ProviderRegistry())
    keyed = resolve_provider(Request(provider="pollinations", api_key="sk"), http, ProviderRegistry())
    assert keyless._stream_endpoint() == POLLINATIONS_FREE_CHAT_URL  # nosec B101
    assert keyed._stream_endpoint() == POLLINATIONS_CHAT_URL  # nosec B101


def test_bare_url_identifier_selects_generic(http):
    url = "https://llm.example.com/v1/chat/completions"
    strategy = resolve_provider(Request(provider=url, model="m"), http, ProviderRegistry())
    assert isinstance(strategy, GenericStrategy)  # nosec B101
    assert strategy.endpoint == url  # nosec B101


def test_custom_name_with_endpoint_selects_generic(http):
    registry = ProviderRegistry()
    registry.register("myprov", lambda request, client: _Custom(request))
    req = Request(provider="myprov", endpoint="http://localhost:8080/v1/chat/completions")
    strategy = resolve_provider(req, http, registry)
    assert isinstance(strategy, GenericStrategy)  # nosec B101
    assert strategy.endpoint == "http://localhost:8080/v1/chat/completions"  # nosec B101


def test_registered_factory_is_used(http):
    registry = ProviderRegistry()
    handle = registry.register("MyProv", lambda request, client: _Custom(request))
    strategy = resolve_provider(Request(provider=" myprov "), http, registry)
    assert isinstance(strategy, _Custom)  # nosec B101
    assert handle.name == "myprov"  # nosec B101
    assert "MYPROV" in registry  # nosec B101


def test_last_registration_wins(http):
    registry = ProviderRegistry()
    registry.register("dup", lambda request, client: _Custom(request))

    class _Second(_Custom):
        provider_name = "second"

    registry.register("dup", lambda request, client: _Second(request))
    assert isinstance(resolve_provider(Request(provider="dup"), http, registry), _Second)  # nosec B101
    assert len(registry) == 1  # nosec B101


def test_unknown_provider_message(http):
    with pytest.raises(UnknownProviderError) as ei:
        resolve_provider(Request(provider="Nope"), http, ProviderRegistry())
    assert str(ei.value) == "unknown provider: Nope"  # nosec B101


def test_non_url_endpoint_does_not_rescue_unknown_name(http):
    with pytest.raises(UnknownProviderError):
        resolve_provider(Request(provider="nope", endpoint="localhost:8080"), http, ProviderRegistry())


def test_resolution_is_repeatable(http):
    req = Request(provider="openrouter", model="m", api_key="k")
    first = resolve_provider(req, http, ProviderRegistry())
    second = resolve_provider(req, http, ProviderRegistry())
    assert type(first) is type(second)  # nosec B101
    assert first.endpoint == second.endpoint  # nosec B101


def test_register_rejects_bad_input():
    registry = ProviderRegistry()
    with pytest.raises(ValueError):
        registry.register("  ", lambda request, client: None)
    with pytest.raises(ValueError):
        registry.register("x", "not callable")  # type: ignore[arg-type]


def test_builtin_names():
    assert set(ProviderRegistry.builtin_names()) == {"ollama", "pollinations", "openrouter"}  # nosec B101


def test_register_logs_event(captured_logs):
    registry = ProviderRegistry()
    registry.register("logged", lambda request, client: _Custom(request))
    registry.register("logged", lambda request, client: _Custom(request))
    events = [p for p in captured_logs if p.get("event") == "registry.register"]
    assert [e["replaced"] for e in events] == [False, True]  # nosec B101
