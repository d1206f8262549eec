"""Typed keyword options for the one-shot convenience helpers.

Purpose
-------
Validate the loose ``**kwargs`` accepted by :mod:`llmclient.convenience`
(``endpoint``, ``temperature``, ``max_tokens``, ``seed``, ``timeout`` ...)
in one place and copy them onto a :class:`Request`.

External dependencies
---------------------
- Pydantic v2 ``BaseModel``; unknown keywords are rejected so typos surface
  as a ``ValidationError`` instead of being ignored.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import Request


class RequestOptions(BaseModel):
    """Optional per-call settings.

    Attributes
    ----------
    api_key:
        Bearer token; falls back to configuration when omitted.
    endpoint:
        Endpoint override (or the target URL for unregistered providers).
    system_prompt:
        Instruction sent as the first message.
    temperature, max_tokens, seed:
        Sampling controls forwarded when set.
    timeout:
        Whole-request timeout in seconds for the client created for the call.
    """

    model_config = ConfigDict(extra="forbid")

    api_key: Optional[str] = None
    endpoint: Optional[str] = None
    system_prompt: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    seed: Optional[int] = None
    timeout: Optional[float] = Field(default=None, gt=0.0)

    def apply(self, request: Request) -> Request:
        """Return a copy of ``request`` with every set option copied over."""
        fields = self.model_dump(exclude_none=True, exclude={"timeout"})
        return replace(request, **fields) if fields else request


__all__ = ["RequestOptions"]
