"""
Normalized error codes for the llmclient error taxonomy.

Values are lowercase snake_case and are considered a stable public contract
for logging. Configuration failures never reach this enum; they are raised as
:class:`~llmclient.base.registry.UnknownProviderError` or ``ValueError``
before any network I/O happens.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated failure categories for a single provider call."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSPORT = "transport"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    API_STATUS = "api_status"
    EXTRACTION = "extraction"
    PROVIDER_REPORTED = "provider_reported"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
