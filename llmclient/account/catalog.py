"""Text model catalog lookup and filters."""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple

import httpx

from ..base.cancellation import CancellationToken
from ..base.constants import POLLINATIONS_TEXT_MODELS_URL
from ..base.http import get_bytes
from ..base.lookup import LookupRegistry
from .models import AccountRequest, Model
from .parsing import build, decode_json, parse_error


class ModelsProvider(Protocol):
    def list_models(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[List[Model], bytes]:
        ...


class PollinationsModelsProvider:
    """GET ``/text/models``; the body is a bare JSON array of model objects."""

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def list_models(
        self, request: AccountRequest, *, cancel: Optional[CancellationToken] = None
    ) -> Tuple[List[Model], bytes]:
        body = get_bytes(self._http, POLLINATIONS_TEXT_MODELS_URL, request.api_key, provider="pollinations", cancel=cancel)
        doc = decode_json(body, "pollinations")
        if not isinstance(doc, list):
            raise parse_error(TypeError("expected a JSON array of models"), "pollinations")
        return [build(Model, item, "pollinations") for item in doc], body


MODELS_PROVIDERS: LookupRegistry[ModelsProvider] = LookupRegistry(
    "models", {"pollinations": PollinationsModelsProvider}
)


def filter_models_by_modality(
    models: Sequence[Model], input_modality: str = "", output_modality: str = ""
) -> List[Model]:
    """Keep models supporting both modalities; an empty modality matches all."""
    return [
        m
        for m in models
        if (not input_modality or m.has_input_modality(input_modality))
        and (not output_modality or m.has_output_modality(output_modality))
    ]


def filter_models_by_capability(models: Sequence[Model], tools: bool = False, reasoning: bool = False) -> List[Model]:
    """Keep models with every requested capability; ``False`` means "don't care"."""
    return [m for m in models if (not tools or m.tools) and (not reasoning or m.reasoning)]


def filter_free_models(models: Sequence[Model]) -> List[Model]:
    return [m for m in models if not m.paid_only]


__all__ = [
    "ModelsProvider",
    "PollinationsModelsProvider",
    "MODELS_PROVIDERS",
    "filter_models_by_modality",
    "filter_models_by_capability",
    "filter_free_models",
]
