"""Pollinations provider package (chat strategy).

Image, audio and transcription helpers live in :mod:`llmclient.media`; the
account and model catalog lookups in :mod:`llmclient.account`.
"""

from .client import PollinationsStrategy

__all__ = ["PollinationsStrategy"]
