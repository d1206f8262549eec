"""
Errors raised while interpreting a successful response body.
"""
from __future__ import annotations

from dataclasses import dataclass

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class ExtractionError(ProviderError):
    """No interpretation in the extraction ladder recovered any text."""

    code: ErrorCode = ErrorCode.EXTRACTION
    message: str = "failed to extract content"


@dataclass
class ProviderReportedError(ProviderError):
    """A provider returned an ``error`` field instead of content.

    ``str(exc)`` is exactly the provider's message, unwrapped.
    """

    code: ErrorCode = ErrorCode.PROVIDER_REPORTED
    message: str = ""


__all__ = ["ExtractionError", "ProviderReportedError"]
