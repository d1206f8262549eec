"""
Multi-part message content for vision-capable requests.

A ``ContentPart`` is one segment of a user message: plain text, an image
referenced by URL (absolute or ``data:`` URI), or inline base64 image data.
Parts are only ever sent; providers never return them. Each part renders
itself into the OpenAI-compatible wire shape via ``to_wire``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Union


ImageDetail = Literal["auto", "low", "high"]
_DETAILS = ("auto", "low", "high")


@dataclass(frozen=True)
class TextPart:
    """A text segment."""

    text: str
    type: Literal["text"] = "text"

    def to_wire(self) -> Dict[str, Any]:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class ImageURLPart:
    """An image referenced by an absolute URL or a ``data:`` URI.

    The URL is passed through untouched; no validation or transcoding is
    performed here.
    """

    url: str
    detail: Optional[ImageDetail] = None
    type: Literal["image_url"] = "image_url"

    def __post_init__(self) -> None:
        if self.detail is not None and self.detail not in _DETAILS:
            raise ValueError(f"image detail must be one of {_DETAILS}, got {self.detail!r}")

    def to_wire(self) -> Dict[str, Any]:
        image_url: Dict[str, Any] = {"url": self.url}
        if self.detail is not None:
            image_url["detail"] = self.detail
        return {"type": "image_url", "image_url": image_url}


@dataclass(frozen=True)
class ImageBase64Part:
    """Inline image bytes, already base64-encoded.

    Rendered as an ``image_url`` part carrying a ``data:`` URI since that is
    the form every OpenAI-compatible endpoint accepts.
    """

    media_type: str
    data: str
    type: Literal["image_base64"] = "image_base64"

    def data_uri(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"

    def to_wire(self) -> Dict[str, Any]:
        return {"type": "image_url", "image_url": {"url": self.data_uri()}}


ContentPart = Union[TextPart, ImageURLPart, ImageBase64Part]


def image_part(url: str) -> Dict[str, Any]:
    """Wire shape of a bare image reference (used for request-level images)."""
    return ImageURLPart(url=url).to_wire()


__all__ = [
    "ContentPart",
    "TextPart",
    "ImageURLPart",
    "ImageBase64Part",
    "ImageDetail",
    "image_part",
]
