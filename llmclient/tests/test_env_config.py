"""Tests for the configuration layer.

Covers:
- Built-in defaults per provider
- Environment variable naming and overrides
- JSON / YAML config file loading via ``LLMCLIENT_CONFIG_FILE``
- Explicit overrides ignore ``None`` and empty strings
- Client request normalization (endpoint only for built-ins)
- Timeout configuration from the environment
"""

from __future__ import annotations

import httpx
import pytest

from llmclient.base.models import Request
from llmclient.base.timeouts import get_timeout_config, timeout_from_seconds
from llmclient.config import get_provider_config, reset_config_cache
from llmclient.config.env import env_prefix, get_env_var_name, resolve_provider_key


def test_builtin_defaults():
    assert get_provider_config("ollama")["model"] == "llama3.2"  # nosec B101
    assert get_provider_config(" Pollinations ")["model"] == "openai"  # nosec B101
    assert get_provider_config("openrouter")["model"] == "openrouter/auto"  # nosec B101
    assert get_provider_config("unheard-of") == {}  # nosec B101


def test_env_names():
    assert env_prefix("open-router") == "OPEN_ROUTER"  # nosec B101
    assert env_prefix("https://x.example/v1") is None  # nosec B101
    assert get_env_var_name("ollama", "api_key") == "OLLAMA_API_KEY"  # nosec B101
    assert get_env_var_name("ollama", "colour") is None  # nosec B101


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("OPENROUTER_MODEL", "anthropic/claude")
    monkeypatch.setenv("OPENROUTER_API_KEY", "or-123")
    cfg = get_provider_config("openrouter")
    assert cfg["model"] == "anthropic/claude"  # nosec B101
    assert cfg["api_key"] == "or-123"  # nosec B101
    assert resolve_provider_key("openrouter") == ("or-123", "OPENROUTER_API_KEY")  # nosec B101


def test_yaml_config_file(tmp_path, monkeypatch):
    path = tmp_path / "llmclient.yaml"
    path.write_text("ollama:\n  model: qwen2\n  endpoint: http://box:11434/v1/chat/completions\n", encoding="utf-8")
    monkeypatch.setenv("LLMCLIENT_CONFIG_FILE", str(path))
    reset_config_cache()
    cfg = get_provider_config("ollama")
    assert cfg["model"] == "qwen2"  # nosec B101
    assert cfg["endpoint"] == "http://box:11434/v1/chat/completions"  # nosec B101


def test_json_config_file_loses_to_env(tmp_path, monkeypatch):
    path = tmp_path / "llmclient.json"
    path.write_text('{"pollinations": {"model": "file-model", "api_key": "file-key"}}', encoding="utf-8")
    monkeypatch.setenv("LLMCLIENT_CONFIG_FILE", str(path))
    monkeypatch.setenv("POLLINATIONS_MODEL", "env-model")
    cfg = get_provider_config("pollinations")
    assert cfg["model"] == "env-model"  # nosec B101
    assert cfg["api_key"] == "file-key"  # nosec B101


def test_missing_config_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("LLMCLIENT_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_provider_config("ollama") == {"model": "llama3.2"}  # nosec B101


def test_overrides_skip_empty_values():
    cfg = get_provider_config("ollama", {"model": "", "endpoint": None, "api_key": "x"})
    assert cfg == {"model": "llama3.2", "api_key": "x"}  # nosec B101


def test_prepare_fills_endpoint_for_builtins_only(make_client, monkeypatch):
    monkeypatch.setenv("OLLAMA_ENDPOINT", "http://gpu:11434/v1/chat/completions")
    monkeypatch.setenv("MYPROV_ENDPOINT", "http://elsewhere/v1/chat/completions")
    monkeypatch.setenv("MYPROV_API_KEY", "mine")
    client = make_client(lambda request: httpx.Response(200))
    ollama = client.prepare(Request(provider="ollama"))
    custom = client.prepare(Request(provider="myprov"))
    assert ollama.endpoint == "http://gpu:11434/v1/chat/completions"  # nosec B101
    assert ollama.model == "llama3.2"  # nosec B101
    assert custom.endpoint is None  # nosec B101
    assert custom.api_key == "mine"  # nosec B101


def test_prepare_keeps_explicit_values(make_client, monkeypatch):
    monkeypatch.setenv("OLLAMA_MODEL", "env-model")
    client = make_client(lambda request: httpx.Response(200))
    req = client.prepare(Request(provider="ollama", model="explicit"))
    assert req.model == "explicit"  # nosec B101


def test_timeout_config_from_env(monkeypatch):
    monkeypatch.setenv("LLMCLIENT_HTTP_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("LLMCLIENT_CONNECT_TIMEOUT_SECONDS", "bogus")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 30.0  # nosec B101
    assert cfg.connect_timeout_seconds == 10.0  # nosec B101
    assert cfg.stream_read_timeout_seconds == 30.0  # nosec B101
    httpx_timeout = cfg.to_httpx()
    assert httpx_timeout.connect == 10.0  # nosec B101
    assert httpx_timeout.read == 30.0  # nosec B101


def test_timeout_from_seconds_rejects_non_positive():
    assert timeout_from_seconds(5).http_timeout_seconds == 5  # nosec B101
    with pytest.raises(ValueError):
        timeout_from_seconds(0)
