"""Provider registry and dispatch.

Purpose
-------
Map a :class:`Request` to the strategy that will serve it. Built-in
strategies are imported lazily with ``importlib`` so the base layer does not
depend on the provider packages at import time; custom providers are added
at runtime through a :class:`ProviderRegistry`.

Resolution order
----------------
1. Normalize the provider identifier (strip, lower-case).
2. Built-in names: ``ollama``, ``pollinations``, ``openrouter``.
3. The identifier is an absolute http(s) URL: generic strategy on that URL.
4. The request endpoint is an absolute http(s) URL: generic strategy on it.
5. The identifier names a registered factory.
6. Otherwise :class:`UnknownProviderError`.

Resolution performs no I/O and no validation of model or key, so it is safe
to call repeatedly with the same request.

Concurrency
-----------
The registry is a plain dict. Register providers during start-up, before
concurrent dispatch begins.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import import_module
from typing import Dict, Optional, Tuple

import httpx

from .interfaces import ProviderStrategy, StrategyFactory
from .logging import get_logger, log_event
from .models import Request

_logger = get_logger("llmclient.registry")


class UnknownProviderError(Exception):
    """Raised when a provider identifier cannot be resolved.

    This is a configuration error: the identifier is neither a built-in, an
    absolute URL nor a registered name, and the request carries no endpoint
    URL to fall back on.
    """


@dataclass(frozen=True)
class RegistrationHandle:
    """Receipt returned by :meth:`ProviderRegistry.register`."""

    name: str
    factory: StrategyFactory


# Built-in name -> (module, class); classes expose ``from_request``.
_BUILTINS: Dict[str, Tuple[str, str]] = {
    "ollama": ("llmclient.ollama.client", "OllamaStrategy"),
    "pollinations": ("llmclient.pollinations.client", "PollinationsStrategy"),
    "openrouter": ("llmclient.openrouter.client", "OpenRouterStrategy"),
}


def is_url(value: Optional[str]) -> bool:
    """Return True for strings starting with ``http://`` or ``https://``."""
    return bool(value) and value.startswith(("http://", "https://"))


def normalize_name(name: Optional[str]) -> str:
    return (name or "").strip().lower()


class ProviderRegistry:
    """Name -> factory map for custom providers.

    Names are stored lower-cased and trimmed. Registering an existing name
    replaces the previous factory. There is no removal operation.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, StrategyFactory] = {}

    def register(self, name: str, factory: StrategyFactory) -> RegistrationHandle:
        """Register ``factory`` under ``name`` (last registration wins)."""
        key = normalize_name(name)
        if not key:
            raise ValueError("provider name must be non-empty")
        if not callable(factory):
            raise ValueError("provider factory must be callable")
        replaced = key in self._factories
        self._factories[key] = factory
        log_event(_logger, "registry.register", provider=key, replaced=replaced)
        return RegistrationHandle(name=key, factory=factory)

    def get(self, name: str) -> Optional[StrategyFactory]:
        return self._factories.get(normalize_name(name))

    def names(self) -> Tuple[str, ...]:
        """Registered names in registration order."""
        return tuple(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    @staticmethod
    def builtin_names() -> Tuple[str, ...]:
        return tuple(_BUILTINS)


_DEFAULT_REGISTRY = ProviderRegistry()


def default_registry() -> ProviderRegistry:
    """Return the process-wide registry used when none is supplied."""
    return _DEFAULT_REGISTRY


def register_provider(name: str, factory: StrategyFactory) -> RegistrationHandle:
    """Register ``factory`` in the process-wide default registry."""
    return _DEFAULT_REGISTRY.register(name, factory)


def _builtin(name: str, request: Request, http_client: httpx.Client) -> ProviderStrategy:
    module_path, class_name = _BUILTINS[name]
    klass = getattr(import_module(module_path), class_name)
    return klass.from_request(request, http_client)


def _generic(url: str, request: Request, http_client: httpx.Client) -> ProviderStrategy:
    from ..generic.client import GenericStrategy

    return GenericStrategy.for_url(url, request, http_client)


def resolve_provider(
    request: Request,
    http_client: httpx.Client,
    registry: Optional[ProviderRegistry] = None,
) -> ProviderStrategy:
    """Return the strategy serving ``request``.

    Raises:
        UnknownProviderError: ``unknown provider: <identifier as given>``.
    """
    registry = registry if registry is not None else _DEFAULT_REGISTRY
    raw = request.provider or ""
    name = normalize_name(raw)

    if name in _BUILTINS:
        return _builtin(name, request, http_client)
    if is_url(name):
        return _generic(raw.strip(), request, http_client)
    if is_url(request.endpoint):
        return _generic(request.endpoint, request, http_client)
    factory = registry.get(name)
    if factory is not None:
        return factory(request, http_client)
    raise UnknownProviderError(f"unknown provider: {raw}")


__all__ = [
    "UnknownProviderError",
    "RegistrationHandle",
    "ProviderRegistry",
    "default_registry",
    "register_provider",
    "resolve_provider",
    "is_url",
    "normalize_name",
]
