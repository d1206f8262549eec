"""Per-kind provider registries for the media and account collaborators.

Each collaborator kind (image, audio, transcription, models, balance,
profile, usage) resolves a provider name to an implementation object built
from the shared ``httpx.Client``. Built-ins are fixed at construction;
custom implementations are added with :meth:`LookupRegistry.register`.
"""

from __future__ import annotations

from typing import Callable, Dict, Generic, Mapping, Optional, Tuple, TypeVar

import httpx

from .logging import get_logger, log_event
from .registry import UnknownProviderError, normalize_name

T = TypeVar("T")
LookupFactory = Callable[[httpx.Client], T]

_logger = get_logger("llmclient.registry")


class LookupRegistry(Generic[T]):
    """Name -> factory map for one collaborator ``kind``.

    Registered names take precedence over built-ins so a caller can replace
    the stock implementation (e.g. to point at a proxy).
    """

    def __init__(self, kind: str, builtins: Optional[Mapping[str, LookupFactory]] = None) -> None:
        self.kind = kind
        self._builtins: Dict[str, LookupFactory] = dict(builtins or {})
        self._custom: Dict[str, LookupFactory] = {}

    def register(self, name: str, factory: LookupFactory) -> None:
        key = normalize_name(name)
        if not key:
            raise ValueError(f"{self.kind} provider name must be non-empty")
        self._custom[key] = factory
        log_event(_logger, "registry.register", provider=key, kind=self.kind)

    def names(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys([*self._builtins, *self._custom]))

    def resolve(self, name: str, http_client: httpx.Client) -> T:
        """Build the implementation registered for ``name``.

        Raises:
            UnknownProviderError: ``unknown <kind> provider: <name>``.
        """
        key = normalize_name(name)
        factory = self._custom.get(key) or self._builtins.get(key)
        if factory is None:
            raise UnknownProviderError(f"unknown {self.kind} provider: {name}")
        return factory(http_client)


__all__ = ["LookupRegistry", "LookupFactory"]
