"""Command line entrypoint (``python -m llmclient``).

Wires argument parsing to the handlers in ``actions``; performs no provider
logic directly.
"""

from __future__ import annotations

import sys
from typing import List, Optional

from ..base.logging import configure_logger
from ..client import Client
from .actions import HANDLERS
from .parser import COMMANDS, build_parser


def main(argv: Optional[List[str]] = None, *, client: Optional[Client] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``. The ``chat``
        subcommand is assumed when none is given.
    client: Optional[Client]
        Client to use instead of a freshly created one (not closed here).

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    argv_list = _with_command(list(sys.argv[1:] if argv is None else argv))
    args = build_parser().parse_args(argv_list)
    if args.log_level:
        configure_logger(level=args.log_level)

    handler = HANDLERS[args.cmd]
    if client is not None:
        return handler(args, client)
    with Client(timeout=args.timeout) as owned:
        return handler(args, owned)


def _with_command(argv: List[str]) -> List[str]:
    # Global options (only --log-level) stay in front of the subcommand.
    head = argv[:2] if argv[:1] == ["--log-level"] else []
    rest = argv[len(head):]
    if (rest and rest[0] in COMMANDS) or rest[:1] in (["-h"], ["--help"]):
        return argv
    return head + ["chat"] + rest


__all__ = ["main"]
