"""Shared base for strategies speaking the OpenAI chat completions dialect."""

from .base import BaseOpenAIStyleStrategy
from .strategy_init import StrategyInit

__all__ = ["BaseOpenAIStyleStrategy", "StrategyInit"]
