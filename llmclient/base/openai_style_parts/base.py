"""BaseOpenAIStyleStrategy: shared behaviour of OpenAI-compatible providers.

Every built-in provider, and the generic URL strategy, speaks the same
``/v1/chat/completions`` dialect; subclasses only tweak the endpoint used for
streaming, whether the credential is sent, and a few payload fields.

Flow (buffered): assemble messages, POST JSON, run the extraction ladder.
Flow (streaming): assemble messages, POST JSON with ``"stream": true``,
decode SSE frames into :class:`StreamChunk` objects.

Errors from transport, status checks, extraction, cancellation and user
callbacks propagate unchanged after a structured ``chat.error`` /
``stream.finalize`` event. Nothing is retried.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

import httpx

from ..cancellation import CancellationToken, CancelledError
from ..errors import ErrorCode, ProviderError
from ..extraction import extract_content
from ..http import post_json, stream_post_json
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import Message, StreamCallback, StreamChunk
from ..streaming import decode_stream, iter_stream_chunks
from ..utils.messages import assemble_messages
from .strategy_init import StrategyInit


def _error_code(exc: BaseException) -> str:
    if isinstance(exc, ProviderError):
        return exc.code.value
    if isinstance(exc, CancelledError):
        return ErrorCode.CANCELLED.value
    return "callback"


class BaseOpenAIStyleStrategy:
    """Reusable base class for OpenAI-compatible chat strategies.

    Subclasses set ``provider_name`` and may override:
    - ``send_stream_flag_when_buffered``: include ``"stream": false`` in
      buffered payloads.
    - ``_wire_key()``: credential actually sent.
    - ``_stream_endpoint()``: URL used for streaming calls.
    """

    provider_name: str = "generic"
    send_stream_flag_when_buffered: bool = False

    def __init__(self, init: StrategyInit) -> None:
        self._endpoint = init.endpoint
        self._model = init.model
        self._api_key = init.api_key or None
        self._http = init.http_client
        self._sampling = dict(init.sampling)
        self._logger = get_logger(f"providers.{self.provider_name}")

    # ----- Introspection -----
    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def model(self) -> str:
        return self._model

    @property
    def http_client(self) -> httpx.Client:
        return self._http

    def _wire_key(self) -> Optional[str]:
        return self._api_key

    def _stream_endpoint(self) -> str:
        return self._endpoint

    def _ctx(self, endpoint: str, stream: bool) -> LogContext:
        return LogContext(provider=self.provider_name, model=self._model, endpoint=endpoint, stream=stream)

    # ----- Payload -----
    def build_payload(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        stream: bool,
    ) -> Dict[str, Any]:
        """Return the JSON body for one chat call."""
        payload: Dict[str, Any] = {
            "model": self._model,
            "messages": assemble_messages(history, images, system_prompt),
        }
        if stream:
            payload["stream"] = True
        elif self.send_stream_flag_when_buffered:
            payload["stream"] = False
        payload.update(self._sampling)
        return payload

    # ----- Chat -----
    def send(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> str:
        """Perform a buffered chat completion and return the assistant text."""
        return self.send_with_raw(history, images, system_prompt, cancel=cancel)[0]

    def send_with_raw(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Tuple[str, bytes]:
        """Like :meth:`send` but also return the undecoded response body."""
        ctx = self._ctx(self._endpoint, stream=False)
        payload = self.build_payload(history, images, system_prompt, stream=False)
        normalized_log_event(
            self._logger, "chat.start", ctx, phase="start", emitted=False, messages=len(payload["messages"])
        )
        t0 = time.perf_counter()
        try:
            body = post_json(
                self._http,
                self._endpoint,
                payload,
                self._wire_key(),
                provider=self.provider_name,
                model=self._model,
                cancel=cancel,
            )
            content = extract_content(body)
        except (ProviderError, CancelledError) as exc:
            if isinstance(exc, ProviderError) and exc.provider == "unknown":
                exc.provider, exc.model = self.provider_name, self._model
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=_error_code(exc),
                emitted=False,
                error=str(exc),
                duration_ms=int((time.perf_counter() - t0) * 1000),
            )
            raise
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            duration_ms=int((time.perf_counter() - t0) * 1000),
            chars=len(content),
        )
        return content, body

    # ----- Streaming -----
    def _open_stream(self, payload: Dict[str, Any], endpoint: str, cancel: Optional[CancellationToken]):
        return stream_post_json(
            self._http,
            endpoint,
            payload,
            self._wire_key(),
            provider=self.provider_name,
            model=self._model,
            cancel=cancel,
        )

    def _log_stream_finalize(self, ctx: LogContext, t0: float, emitted: int, exc: Optional[BaseException]) -> None:
        normalized_log_event(
            self._logger,
            "stream.finalize",
            ctx,
            phase="finalize",
            error_code=_error_code(exc) if exc is not None else None,
            emitted=emitted,
            error=str(exc) if exc is not None else None,
            duration_ms=int((time.perf_counter() - t0) * 1000),
        )

    def send_stream(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        callback: StreamCallback,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> int:
        """Stream a chat completion into ``callback``.

        Returns the number of content chunks delivered. A callback exception
        aborts the stream and propagates unchanged.
        """
        endpoint = self._stream_endpoint()
        ctx = self._ctx(endpoint, stream=True)
        payload = self.build_payload(history, images, system_prompt, stream=True)
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", emitted=False)
        t0 = time.perf_counter()
        counter = _CountingCallback(callback)
        try:
            with self._open_stream(payload, endpoint, cancel) as lines:
                decode_stream(lines, counter, cancel=cancel, logger=self._logger, ctx=ctx)
        except Exception as exc:
            self._log_stream_finalize(ctx, t0, counter.count, exc)
            raise
        self._log_stream_finalize(ctx, t0, counter.count, None)
        return counter.count

    def iter_stream(
        self,
        history: Sequence[Message],
        images: Sequence[str],
        system_prompt: str,
        *,
        cancel: Optional[CancellationToken] = None,
    ) -> Iterator[StreamChunk]:
        """Yield stream chunks lazily; closing the generator closes the response."""
        endpoint = self._stream_endpoint()
        ctx = self._ctx(endpoint, stream=True)
        payload = self.build_payload(history, images, system_prompt, stream=True)
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", emitted=False)
        t0 = time.perf_counter()
        emitted = 0
        error: Optional[BaseException] = None
        try:
            with self._open_stream(payload, endpoint, cancel) as lines:
                for chunk in iter_stream_chunks(lines, cancel, logger=self._logger, ctx=ctx):
                    if not chunk.done:
                        emitted += 1
                    yield chunk
        except Exception as exc:
            error = exc
            raise
        finally:
            # Also runs when the consumer closes the generator early.
            self._log_stream_finalize(ctx, t0, emitted, error)


class _CountingCallback:
    def __init__(self, callback: StreamCallback) -> None:
        self._callback = callback
        self.count = 0

    def __call__(self, chunk: StreamChunk) -> None:
        self._callback(chunk)
        if not chunk.done:
            self.count += 1


__all__ = ["BaseOpenAIStyleStrategy"]
