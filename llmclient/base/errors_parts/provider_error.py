"""
Structured provider error exception types.

``ProviderError`` carries a normalized :class:`ErrorCode` plus the provider and
model that produced the failure. Subclasses map to the stages a call can fail
in: transport (request construction, network, body read), protocol (non-2xx
status) and content extraction. A provider-reported error (an ``error`` field
inside an otherwise successful body) is surfaced as its own message.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"ollama"``).
        model: Optional model name associated with the failure.
        retryable: Hint for callers implementing their own retry policy. The
            library itself never retries.
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "unknown"
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class TransportError(ProviderError):
    """Request construction, network or body-read failure.

    ``message`` is prefixed with the stage label (``"request: ..."``,
    ``"read response: ..."``) so the failing step is visible in logs.
    """

    stage: str = "request"


@dataclass
class APIStatusError(ProviderError):
    """Non-2xx HTTP status returned by the provider.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response body text.
    """

    status_code: int = 0
    body: str = ""


def api_status_error(
    status_code: int,
    body: str,
    *,
    code: ErrorCode = ErrorCode.API_STATUS,
    provider: str = "unknown",
    model: Optional[str] = None,
) -> APIStatusError:
    """Build an :class:`APIStatusError` with the canonical message format."""
    return APIStatusError(
        code=code,
        message=f"api error {status_code}: {body}",
        provider=provider,
        model=model,
        retryable=status_code == 429 or status_code >= 500,
        status_code=status_code,
        body=body,
    )


__all__ = ["ProviderError", "TransportError", "APIStatusError", "api_status_error"]
