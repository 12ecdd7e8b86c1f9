"""CLI action handlers.

Purpose
-------
Subcommand handlers for the gateway CLI, keeping the entrypoint minimal.
This module has no top-level side effects and is safe to import in tests.

Error Semantics
---------------
- ``providers`` never performs network I/O and never prints key values.
- ``chat`` prints the reply to stdout; failures go to stderr as JSON
  (``errorKind``/``message``) with exit code 1.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from chat_gateway.base.models import ChatResult
from chat_gateway.config.credentials import EnvCredentialResolver, StaticCredentialResolver
from chat_gateway.gateway import Gateway

GatewayFactory = Callable[[], Gateway]


def _default_gateway() -> Gateway:
    return Gateway(EnvCredentialResolver())


def build_payload(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate ``chat`` arguments into a gateway request payload."""
    messages: List[Dict[str, str]] = []
    if args.system:
        messages.append({"role": "system", "content": args.system})
    messages.append({"role": "user", "content": args.message})
    payload: Dict[str, Any] = {
        "provider": args.provider,
        "messages": messages,
        "jsonMode": bool(args.json_mode),
        "temperature": args.temperature,
        "maxTokens": args.max_tokens,
    }
    if args.model:
        payload["model"] = args.model
    return payload


def handle_providers(
    args: argparse.Namespace,
    resolver_factory: Callable[[], StaticCredentialResolver] = EnvCredentialResolver,
    out: Optional[TextIO] = None,
) -> int:
    """Print configured status per provider (booleans only)."""
    out = out if out is not None else sys.stdout
    status = resolver_factory().configured()
    if getattr(args, "json", False):
        print(json.dumps(status), file=out)
    else:
        for name, ok in status.items():
            print(f"{name}: {'configured' if ok else 'not configured'}", file=out)
    return 0


async def _chat_once(gateway: Gateway, payload: Dict[str, Any]) -> ChatResult:
    async with gateway:
        return await gateway.chat(payload)


def handle_chat(
    args: argparse.Namespace,
    gateway_factory: GatewayFactory = _default_gateway,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Send one request and print the content, or the error with exit code 1."""
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    result = asyncio.run(_chat_once(gateway_factory(), build_payload(args)))
    if result.ok:
        print(result.content, file=out)
        return 0
    print(json.dumps(result.to_dict()), file=err)
    return 1


def handle_serve(args: argparse.Namespace, serve_fn: Optional[Callable[..., None]] = None) -> int:
    """Run the dev server; blocks until uvicorn exits."""
    if serve_fn is None:
        from ..dev_server import main as serve_fn
    serve_fn(host=args.host, port=args.port, reload=args.reload)
    return 0


__all__ = ["build_payload", "handle_providers", "handle_chat", "handle_serve"]
