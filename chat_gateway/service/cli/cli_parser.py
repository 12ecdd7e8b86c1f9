"""CLI parser construction for ``chat-gateway``.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from chat_gateway.base.constants import PROVIDER_ALIASES, SUPPORTED_PROVIDERS
from chat_gateway.config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

SUBCOMMANDS = ("providers", "chat", "serve")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser with ``providers``, ``chat`` and ``serve``
        subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog="chat-gateway", description="Multi-provider LLM chat gateway")
    sub = p.add_subparsers(dest="cmd")

    # providers
    p_prov = sub.add_parser("providers", help="Show which providers have a credential configured (default)")
    p_prov.add_argument("--json", action="store_true", help="Print a JSON object instead of lines")

    # chat
    p_chat = sub.add_parser("chat", help="Send one chat request and print the reply")
    p_chat.add_argument(
        "--provider",
        required=True,
        choices=sorted(set(SUPPORTED_PROVIDERS) | set(PROVIDER_ALIASES)),
    )
    p_chat.add_argument("--message", required=True, help="User message text")
    p_chat.add_argument("--system", default=None, help="Optional system instruction")
    p_chat.add_argument("--json", dest="json_mode", action="store_true", help="Request JSON-only output")
    p_chat.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    p_chat.add_argument("--max-tokens", dest="max_tokens", type=int, default=DEFAULT_MAX_TOKENS)
    p_chat.add_argument("--model", default=None)

    # serve
    p_serve = sub.add_parser("serve", help="Run the HTTP gateway with uvicorn")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.add_argument("--reload", action="store_true", default=None)

    return p


__all__ = ["SUBCOMMANDS", "build_parser"]
