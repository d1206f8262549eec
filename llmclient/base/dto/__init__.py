"""Validated option DTOs (Pydantic)."""

from .request_options import RequestOptions

__all__ = ["RequestOptions"]
