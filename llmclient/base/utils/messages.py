"""Message assembly helpers shared across providers.

Turns a provider-agnostic history (plus request-level images and an optional
system prompt) into the OpenAI-compatible ``messages`` array. Helpers here
are side-effect free apart from a debug log line when images are dropped.

Rules
- A non-empty system prompt becomes the first wire message.
- Each history entry yields exactly one wire message, in order.
- Images attach only to the final history entry, and only when its role is
  ``user``; that entry's content becomes a list holding a text part followed
  by one ``image_url`` part per image. Otherwise the images are dropped.
- An entry carrying ``content_parts`` renders its parts verbatim.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..logging import get_logger, log_event
from ..models import Message, image_part

_logger = get_logger("llmclient.messages")


def render_message(message: Message, images: Sequence[str] = ()) -> Dict[str, Any]:
    """Render one message, appending ``images`` as ``image_url`` parts."""
    if message.content_parts is not None:
        parts: List[Dict[str, Any]] = [p.to_wire() for p in message.content_parts]
    elif images:
        parts = [{"type": "text", "text": message.content}]
    else:
        return {"role": message.role, "content": message.content}
    parts.extend(image_part(url) for url in images)
    return {"role": message.role, "content": parts}


def assemble_messages(
    history: Sequence[Message],
    images: Optional[Sequence[str]] = None,
    system_prompt: str = "",
) -> List[Dict[str, Any]]:
    """Build the wire ``messages`` list for a chat request.

    Parameters
    - history: Ordered conversation turns.
    - images: Image URLs or ``data:`` URIs for the final user turn.
    - system_prompt: Optional instruction prepended as a system message.

    Returns
    - A new list; inputs are never mutated.
    """
    images = list(images or [])
    wire: List[Dict[str, Any]] = []
    if system_prompt:
        wire.append({"role": "system", "content": system_prompt})

    last = len(history) - 1
    attach = bool(images) and last >= 0 and history[last].role == "user"
    if images and not attach:
        log_event(
            _logger,
            "messages.images_dropped",
            count=len(images),
            last_role=history[last].role if last >= 0 else None,
            level=logging.DEBUG,
        )

    for i, message in enumerate(history):
        wire.append(render_message(message, images if attach and i == last else ()))
    return wire


__all__ = ["assemble_messages", "render_message"]
