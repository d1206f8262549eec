"""Unit tests for error classification helpers.

Covers:
- ProviderError passthrough
- Timeout and transport exceptions from the stdlib and httpx
- HTTP status extraction and status-to-code mapping
- Message heuristics and the UNKNOWN fallback
- ``describe`` formatting
"""

from __future__ import annotations

import types

import httpx
import pytest

from llmclient.base.errors import (
    ErrorCode,
    ExtractionError,
    ProviderError,
    api_status_error,
    classify_exception,
    classify_status,
)


def test_provider_error_passthrough():
    err = ProviderError(code=ErrorCode.AUTH, message="nope", provider="p")
    assert classify_exception(err) is ErrorCode.AUTH  # nosec B101


def test_timeouts_and_transport():
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.TRANSPORT  # nosec B101


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (507, ErrorCode.SERVER_ERROR),
        (302, ErrorCode.API_STATUS),
        (418, ErrorCode.API_STATUS),
    ],
)
def test_classify_status(status, code):
    assert classify_status(status) is code  # nosec B101


def test_status_attribute_extraction():
    exc = Exception("x")
    exc.response = types.SimpleNamespace(status_code=429)  # type: ignore[attr-defined]
    assert classify_exception(exc) is ErrorCode.RATE_LIMIT  # nosec B101


def test_heuristics_and_unknown():
    assert classify_exception(RuntimeError("Rate limit hit")) is ErrorCode.RATE_LIMIT  # nosec B101
    assert classify_exception(RuntimeError("invalid api key")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("weird")) is ErrorCode.UNKNOWN  # nosec B101


def test_api_status_error_shape():
    err = api_status_error(429, "slow down", code=classify_status(429), provider="openrouter", model="m")
    assert str(err) == "api error 429: slow down"  # nosec B101
    assert err.retryable is True  # nosec B101
    assert err.describe() == "openrouter:m rate_limit: api error 429: slow down"  # nosec B101
    assert api_status_error(400, "bad").retryable is False  # nosec B101


def test_extraction_error_defaults():
    err = ExtractionError()
    assert err.code is ErrorCode.EXTRACTION  # nosec B101
    assert str(err) == "failed to extract content"  # nosec B101
    assert isinstance(err, ProviderError)  # nosec B101
