"""Module-level one-shot helpers.

Each helper builds a request, runs it through a :class:`Client` and returns
the plain result. Without an explicit ``client`` the call uses the pooled
``httpx.Client`` from :func:`get_default_client`, so repeated helper calls
reuse connections.

Keyword options (validated by :class:`RequestOptions`): ``api_key``,
``endpoint``, ``system_prompt``, ``temperature``, ``max_tokens``, ``seed``
and ``timeout`` (seconds).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from .account import AccountRequest, Balance, Model, Profile, Usage, UsageFormat, UsageRequest
from .base.cancellation import CancellationToken
from .base.dto import RequestOptions
from .base.http import get_default_client
from .base.models import Message, Request, StreamCallback, StreamResponse
from .base.timeouts import timeout_from_seconds
from .client import Client
from .media import AudioRequest, ImageRequest, TranscriptionRequest


def _client(client: Optional[Client], timeout: Optional[float]) -> Client:
    if client is not None:
        return client
    return Client(get_default_client(timeout_from_seconds(timeout)))


def _request(provider: str, model: str, options: Dict[str, Any], **fields: Any) -> Tuple[Request, Optional[float]]:
    opts = RequestOptions(**options)
    return opts.apply(Request(provider=provider, model=model, **fields)), opts.timeout


def send(
    provider: str,
    model: str,
    prompt: str,
    *,
    client: Optional[Client] = None,
    cancel: Optional[CancellationToken] = None,
    **options: Any,
) -> str:
    """Send a single prompt and return the reply text."""
    request, timeout = _request(provider, model, options, prompt=prompt)
    return _client(client, timeout).send(request, cancel=cancel).content


def send_messages(
    provider: str,
    model: str,
    messages: Sequence[Message],
    *,
    client: Optional[Client] = None,
    cancel: Optional[CancellationToken] = None,
    **options: Any,
) -> str:
    """Send a full conversation history and return the reply text."""
    request, timeout = _request(provider, model, options, messages=list(messages))
    return _client(client, timeout).send(request, cancel=cancel).content


def send_with_images(
    provider: str,
    model: str,
    prompt: str,
    images: Sequence[str],
    *,
    client: Optional[Client] = None,
    cancel: Optional[CancellationToken] = None,
    **options: Any,
) -> str:
    """Send a prompt with image URLs / data URIs attached."""
    request, timeout = _request(provider, model, options, prompt=prompt, images=list(images))
    return _client(client, timeout).send(request, cancel=cancel).content


def send_stream(
    provider: str,
    model: str,
    prompt: str,
    callback: StreamCallback,
    *,
    client: Optional[Client] = None,
    cancel: Optional[CancellationToken] = None,
    **options: Any,
) -> StreamResponse:
    """Stream a single prompt into ``callback``."""
    request, timeout = _request(provider, model, options, prompt=prompt)
    return _client(client, timeout).send_stream(request, callback, cancel=cancel)


def generate_image(
    provider: str,
    prompt: str,
    *,
    model: str = "",
    api_key: Optional[str] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    seed: Optional[int] = None,
    client: Optional[Client] = None,
    timeout: Optional[float] = None,
) -> bytes:
    request = ImageRequest(
        provider=provider, prompt=prompt, model=model, api_key=api_key, width=width, height=height, seed=seed
    )
    return _client(client, timeout).generate_image(request).data


def generate_audio(
    provider: str,
    prompt: str,
    *,
    model: str = "",
    api_key: Optional[str] = None,
    client: Optional[Client] = None,
    timeout: Optional[float] = None,
) -> bytes:
    request = AudioRequest(provider=provider, prompt=prompt, model=model, api_key=api_key)
    return _client(client, timeout).generate_audio(request).data


def transcribe_audio(
    provider: str,
    file_name: str,
    file_data: bytes,
    *,
    model: str = "",
    api_key: Optional[str] = None,
    language: str = "",
    prompt: str = "",
    response_format: str = "",
    temperature: Optional[float] = None,
    client: Optional[Client] = None,
    timeout: Optional[float] = None,
) -> str:
    request = TranscriptionRequest(
        provider=provider,
        file_name=file_name,
        file_data=file_data,
        model=model,
        api_key=api_key,
        language=language,
        prompt=prompt,
        response_format=response_format,
        temperature=temperature,
    )
    return _client(client, timeout).transcribe_audio(request).text


def list_text_models(
    provider: str, api_key: Optional[str] = None, *, client: Optional[Client] = None
) -> List[Model]:
    return _client(client, None).list_text_models(AccountRequest(provider=provider, api_key=api_key)).models


def get_balance(provider: str, api_key: Optional[str] = None, *, client: Optional[Client] = None) -> Balance:
    return _client(client, None).get_balance(AccountRequest(provider=provider, api_key=api_key)).balance


def get_profile(provider: str, api_key: Optional[str] = None, *, client: Optional[Client] = None) -> Profile:
    return _client(client, None).get_profile(AccountRequest(provider=provider, api_key=api_key)).profile


def get_usage(
    provider: str,
    api_key: Optional[str] = None,
    format: str = UsageFormat.JSON.value,
    *,
    client: Optional[Client] = None,
) -> Usage:
    request = UsageRequest(provider=provider, api_key=api_key, format=format)
    return _client(client, None).get_usage(request).usage


__all__ = [
    "send",
    "send_messages",
    "send_with_images",
    "send_stream",
    "generate_image",
    "generate_audio",
    "transcribe_audio",
    "list_text_models",
    "get_balance",
    "get_profile",
    "get_usage",
]
