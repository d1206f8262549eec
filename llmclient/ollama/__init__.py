"""Ollama provider package."""

from .client import OllamaStrategy

__all__ = ["OllamaStrategy"]
