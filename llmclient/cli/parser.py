"""CLI parser construction for ``python -m llmclient``.

Wires subparsers only; handlers live in ``actions``.
"""

from __future__ import annotations

import argparse

from ..config.defaults import CLI_DEFAULT_PROVIDER

COMMANDS = ("chat", "image", "audio", "transcribe", "models", "balance", "profile", "usage")


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--provider", default=CLI_DEFAULT_PROVIDER)
    parser.add_argument("--api-key", default=None, help="Overrides <PROVIDER>_API_KEY")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser; performs no I/O."""
    p = argparse.ArgumentParser(prog="llmclient", description="Multi-provider LLM client")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING (default) or ERROR")
    sub = p.add_subparsers(dest="cmd")

    p_chat = sub.add_parser("chat", help="Send a prompt (default command)")
    _add_common(p_chat)
    p_chat.add_argument("--model", default="")
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default="")
    p_chat.add_argument("--image", action="append", default=[], help="Image URL or data URI; repeatable")
    p_chat.add_argument("--endpoint", default=None)
    p_chat.add_argument("--temperature", type=float, default=None)
    p_chat.add_argument("--max-tokens", type=int, default=None)
    p_chat.add_argument("--seed", type=int, default=None)
    p_chat.add_argument("--stream", action="store_true", help="Print tokens as they arrive")
    p_chat.add_argument("--json", action="store_true", help="Print a JSON object instead of raw text")

    p_image = sub.add_parser("image", help="Generate an image")
    _add_common(p_image)
    p_image.add_argument("--model", default="")
    p_image.add_argument("--prompt", required=True)
    p_image.add_argument("--width", type=int, default=None)
    p_image.add_argument("--height", type=int, default=None)
    p_image.add_argument("--seed", type=int, default=None)
    p_image.add_argument("--out", required=True)

    p_audio = sub.add_parser("audio", help="Generate speech")
    _add_common(p_audio)
    p_audio.add_argument("--model", default="")
    p_audio.add_argument("--prompt", required=True)
    p_audio.add_argument("--out", required=True)

    p_tr = sub.add_parser("transcribe", help="Transcribe an audio file")
    _add_common(p_tr)
    p_tr.add_argument("--model", default="")
    p_tr.add_argument("--file", required=True)
    p_tr.add_argument("--language", default="")
    p_tr.add_argument("--prompt", default="")
    p_tr.add_argument("--response-format", default="")
    p_tr.add_argument("--temperature", type=float, default=None)

    p_models = sub.add_parser("models", help="List text models")
    _add_common(p_models)
    p_models.add_argument("--free", action="store_true", help="Only models usable without a paid plan")
    p_models.add_argument("--input", default="", help="Required input modality")
    p_models.add_argument("--output", default="", help="Required output modality")

    for name, help_text in (("balance", "Show account balance"), ("profile", "Show account profile")):
        _add_common(sub.add_parser(name, help=help_text))

    p_usage = sub.add_parser("usage", help="Show usage history")
    _add_common(p_usage)
    p_usage.add_argument("--format", default="json", choices=("json", "csv"))

    return p


__all__ = ["build_parser", "COMMANDS"]
