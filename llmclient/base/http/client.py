"""Shared HTTP client pool.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances for
    callers that do not inject their own client (module-level convenience
    helpers, the CLI). A ``Client`` created without an explicit
    ``http_client`` owns a private instance instead; see
    :class:`llmclient.client.Client`.

Timeout strategy:
    - Pooled clients are keyed by the full timeout configuration so a caller asking
      for a shorter budget never mutates a client shared with others.
    - Defaults derive from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - All pooled clients are closed at interpreter exit via ``atexit``. Tests
      may also call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config

_CLIENTS: Dict[TimeoutConfig, httpx.Client] = {}
_LOCK = threading.RLock()


def new_httpx_client(timeout: Optional[TimeoutConfig] = None) -> httpx.Client:
    """Create a fresh ``httpx.Client`` configured from ``timeout``."""
    cfg = timeout or get_timeout_config()
    return httpx.Client(timeout=cfg.to_httpx(), follow_redirects=True)


def get_default_client(timeout: Optional[TimeoutConfig] = None) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given timeout configuration.

    The first request for a key creates the client; subsequent requests reuse
    the same instance. Safe for concurrent use; creation is guarded by a
    re-entrant lock and ``httpx.Client`` itself is thread-safe.
    """
    cfg = timeout or get_timeout_config()
    key = cfg
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = new_httpx_client(cfg)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["new_httpx_client", "get_default_client", "close_all_clients"]
