"""Unit tests for the command line interface.

Covers:
- ``chat`` as the implicit default command, plain, ``--json`` and ``--stream``
- Exit codes and JSON error reporting for unknown providers and API errors
- Media subcommands writing to ``--out`` and reading ``--file``
- Model listing filters and usage CSV passthrough
"""

from __future__ import annotations

import json

import httpx

from llmclient.cli import _with_command, main

from .utils import chat_body, json_response, request_json, sse_body


def _last_json(text: str):
    # Warning-level log events may share stderr with the error report.
    return json.loads(text.strip().splitlines()[-1])


def test_default_command_insertion():
    assert _with_command(["--prompt", "x"]) == ["chat", "--prompt", "x"]  # nosec B101
    assert _with_command(["models", "--free"]) == ["models", "--free"]  # nosec B101
    assert _with_command(["--log-level", "DEBUG", "usage"]) == ["--log-level", "DEBUG", "usage"]  # nosec B101
    assert _with_command(["--log-level", "DEBUG", "--prompt", "x"]) == [  # nosec B101
        "--log-level",
        "DEBUG",
        "chat",
        "--prompt",
        "x",
    ]
    assert _with_command(["-h"]) == ["-h"]  # nosec B101


def test_chat_plain(make_client, capsys):
    client = make_client(lambda request: httpx.Response(200, content=chat_body("pong")))
    rc = main(["--provider", "ollama", "--model", "m", "--prompt", "ping", "--temperature", "0.5"], client=client)
    assert rc == 0  # nosec B101
    assert capsys.readouterr().out == "pong\n"  # nosec B101
    assert request_json(client.http_client.recorded[0])["temperature"] == 0.5  # nosec B101


def test_chat_json(make_client, capsys):
    client = make_client(lambda request: httpx.Response(200, content=chat_body("pong")))
    rc = main(["chat", "--provider", "ollama", "--model", "m", "--prompt", "ping", "--json"], client=client)
    out = json.loads(capsys.readouterr().out)
    assert rc == 0  # nosec B101
    assert out == {"content": "pong", "provider": "ollama", "model": "m"}  # nosec B101


def test_chat_stream(make_client, capsys):
    client = make_client(lambda request: httpx.Response(200, content=sse_body("Hel", "lo")))
    rc = main(["chat", "--provider", "ollama", "--prompt", "hi", "--stream"], client=client)
    assert rc == 0  # nosec B101
    assert capsys.readouterr().out == "Hello\n"  # nosec B101


def test_unknown_provider_exit_code(make_client, capsys):
    client = make_client(lambda request: httpx.Response(200))
    rc = main(["--provider", "nope", "--prompt", "hi"], client=client)
    err = _last_json(capsys.readouterr().err)
    assert rc == 2  # nosec B101
    assert err == {"error": "unknown provider: nope"}  # nosec B101


def test_api_error_exit_code(make_client, capsys):
    client = make_client(lambda request: httpx.Response(401, content=b"bad key"))
    rc = main(["--provider", "openrouter", "--prompt", "hi", "--api-key", "k"], client=client)
    err = _last_json(capsys.readouterr().err)
    assert rc == 1  # nosec B101
    assert err == {"error": "api error 401: bad key", "code": "auth"}  # nosec B101


def test_image_writes_file(make_client, tmp_path, capsys):
    client = make_client(lambda request: httpx.Response(200, content=b"PNGDATA"))
    out = tmp_path / "cat.png"
    rc = main(["image", "--prompt", "a cat", "--width", "64", "--out", str(out)], client=client)
    assert rc == 0  # nosec B101
    assert out.read_bytes() == b"PNGDATA"  # nosec B101
    assert json.loads(capsys.readouterr().out)["bytes"] == 7  # nosec B101


def test_transcribe_missing_file(make_client, tmp_path, capsys):
    client = make_client(lambda request: httpx.Response(200))
    rc = main(["transcribe", "--file", str(tmp_path / "absent.wav")], client=client)
    assert rc == 1  # nosec B101
    assert "error" in _last_json(capsys.readouterr().err)  # nosec B101
    assert client.http_client.recorded == []  # nosec B101


def test_transcribe_prints_text(make_client, tmp_path, capsys):
    audio = tmp_path / "clip.wav"
    audio.write_bytes(b"RIFF")
    client = make_client(lambda request: httpx.Response(200, json={"text": "spoken words"}))
    rc = main(["transcribe", "--file", str(audio), "--language", "en"], client=client)
    assert rc == 0  # nosec B101
    assert capsys.readouterr().out == "spoken words\n"  # nosec B101


def test_models_free_filter(make_client, capsys):
    models = [{"name": "free-one", "input_modalities": ["text"]}, {"name": "paid-one", "paid_only": True}]
    client = make_client(lambda request: json_response(models))
    rc = main(["models", "--free"], client=client)
    assert rc == 0  # nosec B101
    assert capsys.readouterr().out.split() == ["free-one"]  # nosec B101


def test_usage_csv(make_client, capsys):
    client = make_client(lambda request: httpx.Response(200, content=b"timestamp,tokens\nx,1"))
    rc = main(["usage", "--format", "csv"], client=client)
    assert rc == 0  # nosec B101
    assert capsys.readouterr().out == "timestamp,tokens\nx,1\n"  # nosec B101


def test_balance_json(make_client, capsys):
    client = make_client(lambda request: json_response({"credits": 1.5, "currency": "USD"}))
    rc = main(["balance"], client=client)
    out = json.loads(capsys.readouterr().out)
    assert rc == 0  # nosec B101
    assert out["credits"] == 1.5  # nosec B101
    assert "raw" not in out  # nosec B101
