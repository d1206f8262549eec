"""Content extraction from buffered chat responses.

Providers disagree on where the assistant text lives, and some wrap JSON in
markdown fences or answer with bare text. ``extract_content`` tries a fixed
ladder of interpretations and returns the first that yields text:

1. Any non-empty top-level ``error`` raises :class:`ProviderReportedError`,
   carrying the string itself, the ``message`` of an error object, or the
   JSON text of any other value.
2. ``choices[0].message.content``, then ``choices[0].content``, then
   ``choices[0].text``.
3. Top-level ``content``, ``text``, then ``output``.
4. A fenced code block (optionally tagged ``json``): the inner text is run
   through the ladder again; if that fails the inner text itself is returned.
5. Any other non-empty body that does not start with ``{`` is returned as is.
6. Otherwise :class:`ExtractionError`.

Only non-empty string values count; anything else is treated as absent.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional, Union

from .errors import ExtractionError, ProviderReportedError

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)
_CHOICE_FIELDS = ("content", "text")
_TOP_LEVEL_FIELDS = ("content", "text", "output")


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _reported_error(doc: Mapping[str, Any]) -> Optional[str]:
    err = doc.get("error")
    if not err:
        return None
    if isinstance(err, Mapping):
        message = _text(err.get("message"))
        if message:
            return message
    return _text(err) or json.dumps(err)


def _from_choices(doc: Mapping[str, Any]) -> Optional[str]:
    choices = doc.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], Mapping):
        return None
    first = choices[0]
    message = first.get("message")
    if isinstance(message, Mapping):
        found = _text(message.get("content"))
        if found:
            return found
    for field in _CHOICE_FIELDS:
        found = _text(first.get(field))
        if found:
            return found
    return None


def _from_document(doc: Mapping[str, Any]) -> Optional[str]:
    message = _reported_error(doc)
    if message:
        raise ProviderReportedError(message=message)
    found = _from_choices(doc)
    if found:
        return found
    for field in _TOP_LEVEL_FIELDS:
        found = _text(doc.get(field))
        if found:
            return found
    return None


def extract_content(body: Union[bytes, str]) -> str:
    """Return the assistant text carried by a response ``body``.

    Raises:
        ProviderReportedError: the body reports a provider error.
        ExtractionError: no rung of the ladder produced text.
    """
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    text = text.strip()

    try:
        doc = json.loads(text)
    except ValueError:
        doc = None
    if isinstance(doc, Mapping):
        found = _from_document(doc)
        if found:
            return found

    match = _FENCE_RE.search(text)
    if match:
        inner = match.group(1)
        try:
            return extract_content(inner)
        except (ExtractionError, ProviderReportedError):
            return inner

    if text and not text.startswith("{"):
        return text
    raise ExtractionError()


__all__ = ["extract_content"]
