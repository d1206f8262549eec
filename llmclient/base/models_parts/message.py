"""
Message DTO used across providers.

Defines the `Message` dataclass and the `Role` literal. ``content`` is always
plain text; ``content_parts``, when present, is the authoritative payload and
``content`` then mirrors its first text part for logging and inspection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple

from .content_part import ContentPart, TextPart


Role = Literal["system", "user", "assistant"]
ROLES: Tuple[str, ...] = ("system", "user", "assistant")


@dataclass
class Message:
    """A chat message in a conversation history.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text of the message.
        content_parts: Optional ordered multi-part payload (text and images).
    """

    role: Role
    content: str = ""
    content_parts: Optional[Tuple[ContentPart, ...]] = None

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"invalid message role: {self.role!r}")
        if self.content_parts is not None:
            self.content_parts = tuple(self.content_parts)

    @classmethod
    def from_parts(cls, role: Role, parts: Sequence[ContentPart]) -> "Message":
        """Build a message from content parts, mirroring the first text part."""
        text = next((p.text for p in parts if isinstance(p, TextPart)), "")
        return cls(role=role, content=text, content_parts=tuple(parts))

    def is_structured(self) -> bool:
        """Return True when ``content_parts`` carries the payload."""
        return self.content_parts is not None


__all__ = [
    "Message",
    "Role",
    "ROLES",
]
