"""Account balance lookup."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_BALANCE_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .models import AccountRequest, Balance
from .parsing import build, decode_json


class BalanceProvider(Protocol):
    def get_balance(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[Balance, bytes]:
        ...


class PollinationsBalanceProvider:
    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def get_balance(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[Balance, bytes]:
        body = get_bytes(self._http, POLLINATIONS_BALANCE_URL, request.api_key, provider="pollinations", cancel=cancel)
        return build(Balance, decode_json(body, "pollinations"), "pollinations"), body


BALANCE_PROVIDERS: LookupRegistry[BalanceProvider] = LookupRegistry(
    "balance", {"pollinations": PollinationsBalanceProvider}
)


__all__ = ["BalanceProvider", "PollinationsBalanceProvider", "BALANCE_PROVIDERS"]
