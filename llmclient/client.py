"""Top-level client.

``Client`` holds one ``httpx.Client`` shared by every call it makes and
routes each request through provider dispatch. Requests are normalized
against the configuration layer first: an empty model, a missing key and,
for built-in providers, a missing endpoint are filled from
:func:`llmclient.config.get_provider_config`.

The client is safe to share between threads as long as registration on its
:class:`ProviderRegistry` happens before concurrent use.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator, List, Optional, Union

import httpx

from .account import (
    BALANCE_PROVIDERS,
    MODELS_PROVIDERS,
    PROFILE_PROVIDERS,
    USAGE_PROVIDERS,
    AccountRequest,
    BalanceResponse,
    ModelsResponse,
    ProfileResponse,
    UsageRequest,
    UsageResponse,
    normalize_format,
)
from .base.cancellation import CancellationToken
from .base.http import new_httpx_client
from .base.interfaces import ProviderStrategy, SupportsChunkIteration
from .base.models import Request, Response, StreamCallback, StreamChunk, StreamResponse
from .base.openai_style_parts import BaseOpenAIStyleStrategy
from .base.registry import ProviderRegistry, default_registry, is_url, normalize_name, resolve_provider
from .base.streaming import StreamAccumulator
from .base.timeouts import TimeoutConfig, timeout_from_seconds
from .config import get_provider_config
from .media import (
    AUDIO_PROVIDERS,
    IMAGE_PROVIDERS,
    TRANSCRIPTION_PROVIDERS,
    AudioRequest,
    AudioResponse,
    ImageRequest,
    ImageResponse,
    TranscriptionRequest,
    TranscriptionResponse,
)


def _require(value: object, what: str) -> None:
    if value is None:
        raise ValueError(f"{what} is None")


class Client:
    """Multi-provider chat client.

    Parameters:
        http_client: Shared ``httpx.Client``. When omitted the instance
            creates and owns one; :meth:`close` only closes an owned client.
        timeout: Overall request timeout in seconds (or a full
            :class:`TimeoutConfig`) for an owned client; ignored when
            ``http_client`` is given.
        registry: Registry consulted for custom provider names; defaults to
            the process-wide registry.
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        *,
        timeout: Union[float, TimeoutConfig, None] = None,
        registry: Optional[ProviderRegistry] = None,
    ) -> None:
        if http_client is None:
            cfg = timeout if isinstance(timeout, TimeoutConfig) else timeout_from_seconds(timeout)
            self._http = new_httpx_client(cfg)
            self._owns_http = True
        else:
            self._http = http_client
            self._owns_http = False
        self._registry = registry if registry is not None else default_registry()

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    @property
    def registry(self) -> ProviderRegistry:
        return self._registry

    # ----- Lifecycle -----
    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ----- Dispatch -----
    def prepare(self, request: Request) -> Request:
        """Return ``request`` with empty fields filled from configuration."""
        name = normalize_name(request.provider)
        if not name or is_url(name):
            return request
        cfg = get_provider_config(name)
        defaults = {"model": cfg.get("model"), "api_key": cfg.get("api_key")}
        if name in ProviderRegistry.builtin_names():
            defaults["endpoint"] = cfg.get("endpoint")
        return request.with_defaults(**defaults)

    def resolve(self, request: Request) -> ProviderStrategy:
        """Resolve the strategy for ``request`` without performing I/O."""
        _require(request, "request")
        return resolve_provider(self.prepare(request), self._http, self._registry)

    # ----- Chat -----
    def send(self, request: Request, *, cancel: Optional[CancellationToken] = None) -> Response:
        """Perform one buffered chat call."""
        _require(request, "request")
        request = self.prepare(request)
        strategy = resolve_provider(request, self._http, self._registry)
        history = request.history()
        raw: Optional[bytes] = None
        if isinstance(strategy, BaseOpenAIStyleStrategy):
            content, raw = strategy.send_with_raw(history, request.images, request.system_prompt, cancel=cancel)
        else:
            content = strategy.send(history, request.images, request.system_prompt, cancel=cancel)
        return Response(content=content, raw=raw, provider=strategy.provider_name, model=request.model or None)

    def send_stream(
        self,
        request: Request,
        callback: StreamCallback,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> StreamResponse:
        """Stream a chat call into ``callback`` and return the aggregated text.

        An exception raised by ``callback`` aborts the stream and propagates.
        """
        _require(request, "request")
        _require(callback, "callback")
        request = self.prepare(request)
        strategy = resolve_provider(request, self._http, self._registry)
        accumulator = StreamAccumulator(callback)
        strategy.send_stream(request.history(), request.images, request.system_prompt, accumulator, cancel=cancel)
        return accumulator.response()

    def stream(self, request: Request, *, cancel: Optional[CancellationToken] = None) -> Iterator[StreamChunk]:
        """Yield stream chunks as they arrive.

        Strategies without pull-style support are driven through their
        callback API and their chunks replayed once the stream ends.
        """
        _require(request, "request")
        request = self.prepare(request)
        strategy = resolve_provider(request, self._http, self._registry)
        return self._iter_chunks(strategy, request, cancel)

    @staticmethod
    def _iter_chunks(
        strategy: ProviderStrategy, request: Request, cancel: Optional[CancellationToken]
    ) -> Iterator[StreamChunk]:
        history = request.history()
        if isinstance(strategy, SupportsChunkIteration):
            yield from strategy.iter_stream(history, request.images, request.system_prompt, cancel=cancel)
            return
        collected: List[StreamChunk] = []
        strategy.send_stream(history, request.images, request.system_prompt, collected.append, cancel=cancel)
        yield from collected

    # ----- Media -----
    def _credential(self, provider: str, api_key: Optional[str]) -> Optional[str]:
        if api_key:
            return api_key
        name = normalize_name(provider)
        return get_provider_config(name).get("api_key") if name else None

    def generate_image(self, request: ImageRequest, *, cancel: Optional[CancellationToken] = None) -> ImageResponse:
        _require(request, "image request")
        provider = IMAGE_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        return ImageResponse(data=provider.generate(request, cancel=cancel))

    def generate_audio(self, request: AudioRequest, *, cancel: Optional[CancellationToken] = None) -> AudioResponse:
        _require(request, "audio request")
        provider = AUDIO_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        return AudioResponse(data=provider.generate(request, cancel=cancel))

    def transcribe_audio(
        self, request: TranscriptionRequest, *, cancel: Optional[CancellationToken] = None
    ) -> TranscriptionResponse:
        _require(request, "transcription request")
        provider = TRANSCRIPTION_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        text, raw = provider.transcribe(request, cancel=cancel)
        return TranscriptionResponse(text=text, raw=raw)

    # ----- Account -----
    def list_text_models(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> ModelsResponse:
        _require(request, "models request")
        provider = MODELS_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        models, raw = provider.list_models(request, cancel=cancel)
        return ModelsResponse(models=models, raw=raw)

    def get_balance(self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None) -> BalanceResponse:
        _require(request, "balance request")
        provider = BALANCE_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        balance, raw = provider.get_balance(request, cancel=cancel)
        return BalanceResponse(balance=balance, raw=raw)

    def get_profile(self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None) -> ProfileResponse:
        _require(request, "profile request")
        provider = PROFILE_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, api_key=self._credential(request.provider, request.api_key))
        profile, raw = provider.get_profile(request, cancel=cancel)
        return ProfileResponse(profile=profile, raw=raw)

    def get_usage(self, request: UsageRequest, *, cancel: Optional[CancellationToken] = None) -> UsageResponse:
        _require(request, "usage request")
        fmt = normalize_format(request.format)
        provider = USAGE_PROVIDERS.resolve(request.provider, self._http)
        request = replace(request, format=fmt, api_key=self._credential(request.provider, request.api_key))
        usage, raw = provider.get_usage(request, cancel=cancel)
        return UsageResponse(usage=usage, raw=raw)


__all__ = ["Client"]
