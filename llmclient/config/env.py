"""llmclient.config.env
===================

Mapping of provider identifiers to environment variable names.

Conventions
-----------
``<PROVIDER>_API_KEY``, ``<PROVIDER>_MODEL`` and ``<PROVIDER>_ENDPOINT`` where
``<PROVIDER>`` is the upper-cased provider name with non-alphanumerics turned
into underscores. Bare-URL provider identifiers have no environment mapping.
Helpers never raise on unknown providers; they return ``None``.
"""

from __future__ import annotations

import os
import re
from typing import Dict, Optional, Tuple

ENV_FIELD_MAP: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "model": "MODEL",
    "endpoint": "ENDPOINT",
}

_NON_ALNUM = re.compile(r"[^A-Z0-9]+")


def env_prefix(provider: str) -> Optional[str]:
    """Return the environment prefix for ``provider`` or ``None`` for URLs."""
    name = (provider or "").strip()
    if not name or "://" in name:
        return None
    prefix = _NON_ALNUM.sub("_", name.upper()).strip("_")
    return prefix or None


def get_env_var_name(provider: str, field: str) -> Optional[str]:
    """Return the environment variable consulted for ``field`` of ``provider``."""
    prefix = env_prefix(provider)
    suffix = ENV_FIELD_MAP.get(field)
    if prefix is None or suffix is None:
        return None
    return f"{prefix}_{suffix}"


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(api_key, env_var_used)`` from the environment, or ``(None, None)``."""
    name = get_env_var_name(provider, "api_key")
    if name and (val := os.environ.get(name)):
        return val, name
    return None, None


__all__ = ["ENV_FIELD_MAP", "env_prefix", "get_env_var_name", "resolve_provider_key"]
