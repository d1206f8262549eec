"""CLI subcommand handlers.

Handlers return a process exit code. Library errors are reported as a JSON
object on stderr: ``1`` for call failures, ``2`` for configuration errors
such as an unknown provider.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict

from ..account import (
    AccountRequest,
    UsageRequest,
    filter_free_models,
    filter_models_by_modality,
)
from ..base.errors import ProviderError
from ..base.logging import get_logger, log_event
from ..base.models import Request, StreamChunk
from ..base.registry import UnknownProviderError
from ..client import Client
from ..media import AudioRequest, ImageRequest, TranscriptionRequest

_logger = get_logger("llmclient.cli")


def _error(payload: Dict[str, Any], code: int) -> int:
    print(json.dumps(payload), file=sys.stderr)
    return code


def guarded(handler: Callable[[argparse.Namespace, Client], int]) -> Callable[[argparse.Namespace, Client], int]:
    """Map library exceptions raised by ``handler`` to exit codes."""

    def run(args: argparse.Namespace, client: Client) -> int:
        log_event(_logger, "cli.command", command=args.cmd, provider=getattr(args, "provider", None))
        try:
            return handler(args, client)
        except UnknownProviderError as exc:
            return _error({"error": str(exc)}, 2)
        except ProviderError as exc:
            return _error({"error": str(exc), "code": exc.code.value}, 1)
        except (OSError, ValueError) as exc:
            return _error({"error": str(exc)}, 1)

    run.__name__ = handler.__name__
    run.__doc__ = handler.__doc__
    return run


@guarded
def handle_chat(args: argparse.Namespace, client: Client) -> int:
    request = Request(
        provider=args.provider,
        model=args.model,
        api_key=args.api_key,
        endpoint=args.endpoint,
        system_prompt=args.system,
        prompt=args.prompt,
        images=list(args.image),
        temperature=args.temperature,
        max_tokens=args.max_tokens,
        seed=args.seed,
    )
    if args.stream:

        def echo(chunk: StreamChunk) -> None:
            if not chunk.done and not args.json:
                sys.stdout.write(chunk.content)
                sys.stdout.flush()

        result = client.send_stream(request, echo)
        if args.json:
            print(json.dumps({"content": result.content, "chunks": result.chunks, "done": result.done}))
        else:
            sys.stdout.write("\n")
        return 0
    response = client.send(request)
    print(json.dumps(response.to_dict()) if args.json else response.content)
    return 0


@guarded
def handle_image(args: argparse.Namespace, client: Client) -> int:
    request = ImageRequest(
        provider=args.provider,
        prompt=args.prompt,
        model=args.model,
        api_key=args.api_key,
        width=args.width,
        height=args.height,
        seed=args.seed,
    )
    data = client.generate_image(request).data
    Path(args.out).write_bytes(data)
    print(json.dumps({"out": args.out, "bytes": len(data)}))
    return 0


@guarded
def handle_audio(args: argparse.Namespace, client: Client) -> int:
    request = AudioRequest(provider=args.provider, prompt=args.prompt, model=args.model, api_key=args.api_key)
    data = client.generate_audio(request).data
    Path(args.out).write_bytes(data)
    print(json.dumps({"out": args.out, "bytes": len(data)}))
    return 0


@guarded
def handle_transcribe(args: argparse.Namespace, client: Client) -> int:
    path = Path(args.file)
    request = TranscriptionRequest(
        provider=args.provider,
        file_name=path.name,
        file_data=path.read_bytes(),
        model=args.model,
        api_key=args.api_key,
        language=args.language,
        prompt=args.prompt,
        response_format=args.response_format,
        temperature=args.temperature,
    )
    print(client.transcribe_audio(request).text)
    return 0


@guarded
def handle_models(args: argparse.Namespace, client: Client) -> int:
    models = client.list_text_models(AccountRequest(provider=args.provider, api_key=args.api_key)).models
    models = filter_models_by_modality(models, args.input, args.output)
    if args.free:
        models = filter_free_models(models)
    for m in models:
        print(m.name)
    return 0


@guarded
def handle_balance(args: argparse.Namespace, client: Client) -> int:
    balance = client.get_balance(AccountRequest(provider=args.provider, api_key=args.api_key)).balance
    print(balance.model_dump_json())
    return 0


@guarded
def handle_profile(args: argparse.Namespace, client: Client) -> int:
    profile = client.get_profile(AccountRequest(provider=args.provider, api_key=args.api_key)).profile
    print(profile.model_dump_json())
    return 0


@guarded
def handle_usage(args: argparse.Namespace, client: Client) -> int:
    request = UsageRequest(provider=args.provider, api_key=args.api_key, format=args.format)
    usage = client.get_usage(request).usage
    print(usage.raw["csv"] if "csv" in usage.raw else usage.model_dump_json())
    return 0


HANDLERS: Dict[str, Callable[[argparse.Namespace, Client], int]] = {
    "chat": handle_chat,
    "image": handle_image,
    "audio": handle_audio,
    "transcribe": handle_transcribe,
    "models": handle_models,
    "balance": handle_balance,
    "profile": handle_profile,
    "usage": handle_usage,
}


__all__ = ["HANDLERS", "guarded"]
