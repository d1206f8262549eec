"""Timeout configuration for llmclient transports.

Centralizes the timeout values used when the client builds its own
``httpx.Client``. Values are read from the environment once and cached; the
cache refreshes if the relevant variables change (tests rely on this).

Supported environment variables (all optional, seconds, must be positive):
    LLMCLIENT_HTTP_TIMEOUT_SECONDS     overall per-request budget (default 120)
    LLMCLIENT_CONNECT_TIMEOUT_SECONDS  connection establishment (default 10)
    LLMCLIENT_STREAM_READ_TIMEOUT_SECONDS
        idle gap allowed between two stream reads (default: the HTTP budget)

Per-call cancellation and deadlines are handled by
:class:`~llmclient.base.cancellation.CancellationToken`; these values bound
each individual network read so a stalled server cannot hang a call.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

DEFAULT_HTTP_TIMEOUT_SECONDS = 120.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0

_ENV_NAMES = (
    "LLMCLIENT_HTTP_TIMEOUT_SECONDS",
    "LLMCLIENT_CONNECT_TIMEOUT_SECONDS",
    "LLMCLIENT_STREAM_READ_TIMEOUT_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool budget of a buffered request.
        connect_timeout_seconds: Budget for establishing the connection.
        stream_read_timeout_seconds: Idle budget between two chunks of a
            streaming body.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    connect_timeout_seconds: float = DEFAULT_CONNECT_TIMEOUT_SECONDS
    stream_read_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``.

        The read budget applies to each body read, so for a stream it bounds
        the idle gap between two chunks.
        """
        return httpx.Timeout(
            self.http_timeout_seconds,
            connect=self.connect_timeout_seconds,
            read=self.stream_read_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    http = _parse_env_float("LLMCLIENT_HTTP_TIMEOUT_SECONDS", DEFAULT_HTTP_TIMEOUT_SECONDS)
    connect = _parse_env_float("LLMCLIENT_CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS)
    stream_read = _parse_env_float("LLMCLIENT_STREAM_READ_TIMEOUT_SECONDS", http)
    _CACHED = TimeoutConfig(
        http_timeout_seconds=http,
        connect_timeout_seconds=connect,
        stream_read_timeout_seconds=stream_read,
    )
    _ENV_GUARD = guard
    return _CACHED


def timeout_from_seconds(seconds: float | None) -> TimeoutConfig:
    """Build a config from an explicit overall budget (``None`` -> env/defaults)."""
    if seconds is None:
        return get_timeout_config()
    if seconds <= 0:
        raise ValueError("timeout must be positive")
    base = get_timeout_config()
    return TimeoutConfig(
        http_timeout_seconds=float(seconds),
        connect_timeout_seconds=min(base.connect_timeout_seconds, float(seconds)),
        stream_read_timeout_seconds=float(seconds),
    )


__all__ = ["TimeoutConfig", "get_timeout_config", "timeout_from_seconds"]
