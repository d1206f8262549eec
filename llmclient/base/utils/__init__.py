"""Pure helpers shared across provider strategies."""

from .messages import assemble_messages, render_message

__all__ = ["assemble_messages", "render_message"]
