"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `llmclient.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import APIStatusError, ProviderError, TransportError, api_status_error
from .extraction_error import ExtractionError, ProviderReportedError
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "TransportError",
    "APIStatusError",
    "api_status_error",
    "ExtractionError",
    "ProviderReportedError",
    "classify_exception",
    "classify_status",
]
