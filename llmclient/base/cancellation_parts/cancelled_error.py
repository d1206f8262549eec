"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of a request or an open stream.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinguishes caller-requested cancellation (or an elapsed deadline) from
    transport failures so callers can suppress log noise for it.
    """

__all__ = ["CancelledError"]
