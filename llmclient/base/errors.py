"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``llmclient.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
    APIStatusError,
    ProviderError,
    TransportError,
    api_status_error,
)
from .errors_parts.extraction_error import ExtractionError, ProviderReportedError
from .errors_parts.classification import classify_exception, classify_status

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
