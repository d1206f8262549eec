"""Account usage history lookup (JSON or CSV)."""
from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Tuple, Union

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_USAGE_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .models import Usage, UsageFormat, UsageRequest
from .parsing import build, decode_json

_WRAPPER_KEYS = ("usage", "data")


def normalize_format(value: Union[str, UsageFormat, None]) -> UsageFormat:
    """Return the usage format for ``value`` (empty means JSON).

    Raises:
        ValueError: ``unsupported usage format: <value>``.
    """
    if isinstance(value, UsageFormat):
        return value
    if not value:
        return UsageFormat.JSON
    try:
        return UsageFormat(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"unsupported usage format: {value}") from None


def unwrap_usage(doc: Any) -> Dict[str, Any]:
    """Accept a bare usage object, a ``usage``/``data`` wrapper or a record list."""
    if isinstance(doc, list):
        return {"records": doc}
    if not isinstance(doc, dict):
        return doc
    if "records" in doc or "totals" in doc:
        return doc
    for key in _WRAPPER_KEYS:
        inner = doc.get(key)
        if isinstance(inner, dict):
            return inner
        if isinstance(inner, list):
            return {"records": inner}
    return doc


class UsageProvider(Protocol):
    def get_usage(self, request: UsageRequest, *, cancel: Optional[CancellationToken] = None) -> Tuple[Usage, bytes]:
        ...


class PollinationsUsageProvider:
    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def get_usage(self, request: UsageRequest, *, cancel: Optional[CancellationToken] = None) -> Tuple[Usage, bytes]:
        fmt = normalize_format(request.format)
        headers = {"Accept": "text/csv"} if fmt is UsageFormat.CSV else None
        body = get_bytes(
            self._http,
            POLLINATIONS_USAGE_URL,
            request.api_key,
            headers=headers,
            provider="pollinations",
            cancel=cancel,
        )
        if fmt is UsageFormat.CSV:
            return Usage(raw={"csv": body.decode("utf-8", errors="replace")}), body
        doc = decode_json(body, "pollinations")
        usage = build(Usage, unwrap_usage(doc), "pollinations")
        if isinstance(doc, dict):
            usage.raw = doc
        return usage, body


USAGE_PROVIDERS: LookupRegistry[UsageProvider] = LookupRegistry(
    "usage", {"pollinations": PollinationsUsageProvider}
)


__all__ = ["UsageProvider", "PollinationsUsageProvider", "USAGE_PROVIDERS", "normalize_format", "unwrap_usage"]
