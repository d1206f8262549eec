"""Cooperative cancellation token implementation.

Exposes the ``CancellationToken`` class passed into client calls to abort a
request before it is issued or an open stream between two lines.
"""

from __future__ import annotations

import time
from threading import Lock
from typing import List, Optional

from .state import State
from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token with optional deadline and cascading.

    Thread-safe for ``cancel`` from one thread and ``raise_if_cancelled`` from
    the thread that is reading the response. Child tokens inherit cancellation
    when the parent is cancelled. A token created with ``timeout`` reports
    itself cancelled once the deadline has elapsed.
    """

    def __init__(
        self,
        *,
        parent: "CancellationToken | None" = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if timeout is not None:
            self._state.deadline = time.monotonic() + timeout
        if parent is not None:
            parent.link_child(self)

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Return a token that cancels itself ``seconds`` from now."""
        return cls(timeout=seconds)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested or the deadline elapsed."""
        if self._state.cancelled:
            return True
        deadline = self._state.deadline
        if deadline is not None and time.monotonic() >= deadline:
            self.cancel("deadline exceeded")
            return True
        return False

    @property
    def reason(self) -> str | None:  # noqa: D401 - short form
        """Reason string supplied at cancel time (if any)."""
        return self._state.reason

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or ``None`` without a deadline."""
        deadline = self._state.deadline
        if deadline is None:
            return None
        return max(0.0, deadline - time.monotonic())

    def cancel(self, reason: str | None = None) -> None:
        """Request cooperative cancellation and cascade to children."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link a child token so parent cancellation cascades (returns child)."""
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` if token is cancelled."""
        if self.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        """Create and link a child token (shortcut)."""
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"CancellationToken(cancelled={self._state.cancelled}, "
            f"reason={self._state.reason!r}, children={len(self._children)})"
        )


__all__ = ["CancellationToken"]
