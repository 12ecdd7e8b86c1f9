"""Gateway CLI (package entrypoint).

Wires argument parsing to action handlers kept in small, focused modules.
It performs no provider logic directly.

Public API re-exports:
- ``main``: CLI entrypoint callable
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_chat, handle_providers, handle_serve
from .cli_parser import SUBCOMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    # Bare invocation lists provider status.
    if not argv_list or argv_list[0] not in SUBCOMMANDS and argv_list[0] not in {"-h", "--help"}:
        argv_list = ["providers"] + argv_list
    args = p.parse_args(argv_list)

    if args.cmd == "chat":
        return handle_chat(args)
    if args.cmd == "serve":
        return handle_serve(args)
    return handle_providers(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
