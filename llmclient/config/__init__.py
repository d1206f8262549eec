"""Unified configuration layer for llmclient.

Goals
-----
* Centralize per-provider defaults (model).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by LLMCLIENT_CONFIG_FILE
    3. Environment variables (e.g. OPENROUTER_API_KEY, OLLAMA_ENDPOINT)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider)``.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Structure example::

    openrouter:
      model: openrouter/auto
      api_key: sk-or-...
    ollama:
      endpoint: http://gpu-box:11434/v1/chat/completions

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

import yaml

from .defaults import (
    CONFIG_FILE_ENV,
    OLLAMA_DEFAULT_MODEL,
    OPENROUTER_DEFAULT_MODEL,
    POLLINATIONS_DEFAULT_MODEL,
)
from .env import ENV_FIELD_MAP, env_prefix


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "ollama": {"model": OLLAMA_DEFAULT_MODEL},
    "pollinations": {"model": POLLINATIONS_DEFAULT_MODEL},
    "openrouter": {"model": OPENROUTER_DEFAULT_MODEL},
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _parse_config_text(text: str) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text) or {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the file named by ``LLMCLIENT_CONFIG_FILE``.

    A missing variable or file yields an empty mapping. A file that is neither
    JSON nor YAML raises ``yaml.YAMLError``; a broken config is a
    configuration error and should fail loudly.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603 - documented module cache
    path = os.getenv(CONFIG_FILE_ENV) or None
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Dict[str, Any] = {}
    if path and Path(path).is_file():
        data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    _FILE_CACHE, _FILE_CACHE_PATH = data, path
    return data


def reset_config_cache() -> None:
    """Forget the cached config file contents (useful in tests)."""
    global _FILE_CACHE, _FILE_CACHE_PATH  # noqa: PLW0603
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    prefix = env_prefix(provider)
    if prefix is None:
        return {}
    out: Dict[str, Any] = {}
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    ``None`` and empty-string overrides are ignored so an unset request field
    never masks a configured value.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v not in (None, "")}

    return cfg


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
