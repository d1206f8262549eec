"""Account profile lookup."""
from __future__ import annotations

from typing import Optional, Protocol, Tuple

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_PROFILE_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .models import AccountRequest, Profile
from .parsing import build, decode_json


class ProfileProvider(Protocol):
    def get_profile(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[Profile, bytes]:
        ...


class PollinationsProfileProvider:
    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def get_profile(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[Profile, bytes]:
        body = get_bytes(self._http, POLLINATIONS_PROFILE_URL, request.api_key, provider="pollinations", cancel=cancel)
        return build(Profile, decode_json(body, "pollinations"), "pollinations"), body


PROFILE_PROVIDERS: LookupRegistry[ProfileProvider] = LookupRegistry(
    "profile", {"pollinations": PollinationsProfileProvider}
)


__all__ = ["ProfileProvider", "PollinationsProfileProvider", "PROFILE_PROVIDERS"]
