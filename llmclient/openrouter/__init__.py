"""OpenRouter provider package."""

from .client import OpenRouterStrategy

__all__ = ["OpenRouterStrategy"]
