"""Account and model-catalog DTOs.

Purpose
-------
Typed views over the JSON documents returned by account endpoints. Fields
that the service omits fall back to empty defaults; unknown keys are kept
(``extra="allow"``) and the whole decoded document is available as ``raw``.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation of loosely specified payloads.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # Explicit nulls mean "absent"; let the field defaults apply.
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ModelPricing(_Lenient):
    """Per-token prices; the service uses camelCase keys."""

    currency: str = ""
    prompt_text_tokens: float = Field(0.0, alias="promptTextTokens")
    prompt_cached_tokens: float = Field(0.0, alias="promptCachedTokens")
    prompt_audio_tokens: float = Field(0.0, alias="promptAudioTokens")
    completion_text_tokens: float = Field(0.0, alias="completionTextTokens")
    completion_audio_tokens: float = Field(0.0, alias="completionAudioTokens")


class Model(_Lenient):
    """One entry of a text model catalog."""

    name: str
    aliases: List[str] = Field(default_factory=list)
    description: str = ""
    pricing: Optional[ModelPricing] = None
    input_modalities: List[str] = Field(default_factory=list)
    output_modalities: List[str] = Field(default_factory=list)
    tools: bool = False
    reasoning: bool = False
    is_specialized: bool = False
    paid_only: bool = False
    context_window: int = 0
    voices: List[str] = Field(default_factory=list)

    def has_input_modality(self, modality: str) -> bool:
        return modality in self.input_modalities

    def has_output_modality(self, modality: str) -> bool:
        return modality in self.output_modalities

    def has_alias(self, alias: str) -> bool:
        return alias in self.aliases

    def effective_price_per_1k_tokens(self) -> float:
        """Prompt plus completion text price scaled to 1000 tokens (0 if unpriced)."""
        if self.pricing is None:
            return 0.0
        return (self.pricing.prompt_text_tokens + self.pricing.completion_text_tokens) * 1000


class Balance(_Lenient):
    credits: float = 0.0
    balance: float = 0.0
    currency: str = ""

    def has_credits(self) -> bool:
        return self.credits > 0 or self.balance > 0


class ProfileUsage(_Lenient):
    total_tokens: int = 0
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_requests: int = 0
    total_cost: float = 0.0
    period_start: str = ""
    period_end: str = ""


class ProfileLimits(_Lenient):
    requests_per_day: int = 0
    tokens_per_day: int = 0
    tokens_per_month: int = 0
    requests_used: int = 0
    tokens_used: int = 0


class Profile(_Lenient):
    id: str = ""
    email: str = ""
    name: str = ""
    username: str = ""
    credits: float = 0.0
    balance: float = 0.0
    usage: Optional[ProfileUsage] = None
    limits: Optional[ProfileLimits] = None
    created_at: str = ""
    plan: str = ""
    subscription: str = ""

    def has_credits(self) -> bool:
        return self.credits > 0 or self.balance > 0

    def usage_percent(self) -> float:
        """Monthly token usage as a percentage; 0 without a monthly limit."""
        if self.limits is None or self.limits.tokens_per_month == 0:
            return 0.0
        return self.limits.tokens_used / self.limits.tokens_per_month * 100


class UsageRecord(_Lenient):
    timestamp: str = ""
    model: str = ""
    provider: str = ""
    type: str = ""
    prompt: str = ""
    tokens: int = 0
    cost: float = 0.0
    currency: str = ""


class UsageTotals(_Lenient):
    total_requests: int = 0
    total_tokens: int = 0
    total_cost: float = 0.0
    currency: str = ""


class Usage(_Lenient):
    """Usage history. CSV responses keep the text under ``raw["csv"]``."""

    records: List[UsageRecord] = Field(default_factory=list)
    totals: Optional[UsageTotals] = None


class UsageFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


@dataclass
class AccountRequest:
    """Provider name plus optional credential for a lookup."""

    provider: str
    api_key: Optional[str] = None


@dataclass
class UsageRequest(AccountRequest):
    format: Union[str, UsageFormat] = UsageFormat.JSON


@dataclass
class ModelsResponse:
    models: List[Model]
    raw: bytes = b""


@dataclass
class BalanceResponse:
    balance: Balance
    raw: bytes = b""


@dataclass
class ProfileResponse:
    profile: Profile
    raw: bytes = b""


@dataclass
class UsageResponse:
    usage: Usage
    raw: bytes = b""


__all__ = [
    "ModelPricing",
    "Model",
    "Balance",
    "ProfileUsage",
    "ProfileLimits",
    "Profile",
    "UsageRecord",
    "UsageTotals",
    "Usage",
    "UsageFormat",
    "AccountRequest",
    "UsageRequest",
    "ModelsResponse",
    "BalanceResponse",
    "ProfileResponse",
    "UsageResponse",
]
