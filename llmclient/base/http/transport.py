"""Transport primitive: one HTTP request, buffered or streaming.

Every provider interaction in the package goes through these helpers:

- ``post_json``: POST a JSON body, read the full response body.
- ``get_bytes``: GET with optional query parameters, read the full body.
- ``post_multipart``: POST ``multipart/form-data``, read the full body.
- ``stream_post_json``: POST a JSON body requesting ``text/event-stream``
  and expose the open body as an iterator of text lines.

Failure semantics:
    - Request construction, network and body-read failures raise
      :class:`TransportError` whose message starts with a stage label
      (``marshal``, ``create request``, ``request``, ``read response``).
    - A status ``>= 300`` raises :class:`APIStatusError` carrying the status
      code and the raw body text.
    - A cancelled :class:`CancellationToken` raises ``CancelledError`` before
      the request is sent; a token deadline caps the per-call timeout.

No retries are performed here or anywhere else in the package.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Mapping, Optional

import httpx

from ..cancellation import CancellationToken
from ..constants import OPENROUTER_HOST_MARKER, OPENROUTER_REFERER, OPENROUTER_TITLE, SSE_ACCEPT
from ..errors import ErrorCode, TransportError, api_status_error, classify_exception, classify_status

_RETRYABLE = (ErrorCode.TIMEOUT, ErrorCode.TRANSPORT)


def build_headers(
    url: str,
    api_key: Optional[str] = None,
    *,
    accept: Optional[str] = None,
    extra: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """Build request headers for ``url``.

    ``Authorization`` is attached only for a non-empty key. Requests to the
    OpenRouter host always carry its two attribution headers.
    """
    headers: Dict[str, str] = {}
    if accept:
        headers["Accept"] = accept
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    if OPENROUTER_HOST_MARKER in url:
        headers["HTTP-Referer"] = OPENROUTER_REFERER
        headers["X-Title"] = OPENROUTER_TITLE
    if extra:
        headers.update(extra)
    return headers


def _transport_error(stage: str, exc: Exception, provider: str, model: Optional[str]) -> TransportError:
    code = classify_exception(exc)
    return TransportError(
        code=code,
        message=f"{stage}: {exc}",
        provider=provider,
        model=model,
        retryable=code in _RETRYABLE,
        raw=exc,
        stage=stage,
    )


def _call_timeout(cancel: Optional[CancellationToken]) -> Any:
    remaining = cancel.remaining() if cancel is not None else None
    if remaining is None:
        return httpx.USE_CLIENT_DEFAULT
    return httpx.Timeout(remaining)


def _build_request(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    provider: str,
    model: Optional[str],
    cancel: Optional[CancellationToken],
    **kwargs: Any,
) -> httpx.Request:
    if cancel is not None:
        cancel.raise_if_cancelled()
    try:
        return client.build_request(method, url, timeout=_call_timeout(cancel), **kwargs)
    except (TypeError, ValueError) as exc:
        raise _transport_error("marshal", exc, provider, model) from exc
    except httpx.HTTPError as exc:
        raise _transport_error("create request", exc, provider, model) from exc


def _send(
    client: httpx.Client,
    request: httpx.Request,
    *,
    provider: str,
    model: Optional[str],
) -> httpx.Response:
    try:
        return client.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise _transport_error("request", exc, provider, model) from exc


def _read(response: httpx.Response, *, provider: str, model: Optional[str]) -> bytes:
    try:
        return response.read()
    except httpx.HTTPError as exc:
        raise _transport_error("read response", exc, provider, model) from exc


def _raise_for_status(response: httpx.Response, body: bytes, *, provider: str, model: Optional[str]) -> None:
    if response.status_code >= 300:
        raise api_status_error(
            response.status_code,
            body.decode("utf-8", errors="replace"),
            code=classify_status(response.status_code),
            provider=provider,
            model=model,
        )


def request_bytes(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    provider: str = "unknown",
    model: Optional[str] = None,
    cancel: Optional[CancellationToken] = None,
    **kwargs: Any,
) -> bytes:
    """Issue one buffered request and return the body of a 2xx response."""
    request = _build_request(client, method, url, provider=provider, model=model, cancel=cancel, **kwargs)
    response = _send(client, request, provider=provider, model=model)
    try:
        body = _read(response, provider=provider, model=model)
    finally:
        response.close()
    _raise_for_status(response, body, provider=provider, model=model)
    return body


def post_json(
    client: httpx.Client,
    url: str,
    payload: Mapping[str, Any],
    api_key: Optional[str] = None,
    *,
    provider: str = "unknown",
    model: Optional[str] = None,
    cancel: Optional[CancellationToken] = None,
) -> bytes:
    """POST ``payload`` as JSON to ``url`` and return the response body."""
    return request_bytes(
        client,
        "POST",
        url,
        provider=provider,
        model=model,
        cancel=cancel,
        json=payload,
        headers=build_headers(url, api_key),
    )


def get_bytes(
    client: httpx.Client,
    url: str,
    api_key: Optional[str] = None,
    *,
    params: Optional[Mapping[str, Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
    provider: str = "unknown",
    cancel: Optional[CancellationToken] = None,
) -> bytes:
    """GET ``url`` (with optional query ``params``) and return the body."""
    kwargs: Dict[str, Any] = {"headers": build_headers(url, api_key, extra=headers)}
    if params:
        kwargs["params"] = dict(params)
    return request_bytes(client, "GET", url, provider=provider, cancel=cancel, **kwargs)


def post_multipart(
    client: httpx.Client,
    url: str,
    *,
    files: Mapping[str, Any],
    data: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    provider: str = "unknown",
    model: Optional[str] = None,
    cancel: Optional[CancellationToken] = None,
) -> bytes:
    """POST a ``multipart/form-data`` body and return the response body."""
    return request_bytes(
        client,
        "POST",
        url,
        provider=provider,
        model=model,
        cancel=cancel,
        files=dict(files),
        data=dict(data or {}),
        headers=build_headers(url, api_key),
    )


def _iter_text_lines(response: httpx.Response, *, provider: str, model: Optional[str]) -> Iterator[str]:
    try:
        yield from response.iter_lines()
    except httpx.HTTPError as exc:
        raise _transport_error("read response", exc, provider, model) from exc


@contextmanager
def stream_post_json(
    client: httpx.Client,
    url: str,
    payload: Mapping[str, Any],
    api_key: Optional[str] = None,
    *,
    provider: str = "unknown",
    model: Optional[str] = None,
    cancel: Optional[CancellationToken] = None,
) -> Iterator[Iterator[str]]:
    """Open a streaming POST and yield the body as an iterator of lines.

    The response is closed when the ``with`` block exits, whether the caller
    consumed every line, stopped early or raised. Closing the response does
    not close ``client``.
    """
    request = _build_request(
        client,
        "POST",
        url,
        provider=provider,
        model=model,
        cancel=cancel,
        json=payload,
        headers=build_headers(url, api_key, accept=SSE_ACCEPT),
    )
    response = _send(client, request, provider=provider, model=model)
    try:
        if response.status_code >= 300:
            body = _read(response, provider=provider, model=model)
            _raise_for_status(response, body, provider=provider, model=model)
        yield _iter_text_lines(response, provider=provider, model=model)
    finally:
        response.close()


__all__ = [
    "build_headers",
    "request_bytes",
    "post_json",
    "get_bytes",
    "post_multipart",
    "stream_post_json",
]
