"""Generic OpenAI-compatible provider package."""

from .client import GenericStrategy

__all__ = ["GenericStrategy"]
