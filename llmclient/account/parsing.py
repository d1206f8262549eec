"""Decoding helpers shared by the account lookups."""
from __future__ import annotations

import json
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..base.errors import ErrorCode, ProviderError

M = TypeVar("M", bound=BaseModel)


def parse_error(exc: Exception, provider: str) -> ProviderError:
    return ProviderError(
        code=ErrorCode.VALIDATION,
        message=f"parse response: {exc}",
        provider=provider,
        raw=exc,
    )


def decode_json(body: bytes, provider: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise parse_error(exc, provider) from exc


def build(model: Type[M], doc: Any, provider: str) -> M:
    """Validate ``doc`` into ``model`` and attach it as ``raw``."""
    if not isinstance(doc, dict):
        raise parse_error(TypeError(f"expected a JSON object, got {type(doc).__name__}"), provider)
    try:
        obj = model.model_validate(doc)
    except ValidationError as exc:
        raise parse_error(exc, provider) from exc
    obj.raw = doc
    return obj


__all__ = ["decode_json", "build", "parse_error"]
