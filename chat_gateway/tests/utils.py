"""Shared testing utilities for the gateway suite.

Exports:
    - StubUpstream: ``httpx.MockTransport`` handler that records requests
    - openai_body / anthropic_body / gemini_body: minimal success payloads
    - msgs: terse message-list builder
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Tuple

import httpx


class StubUpstream:
    """Record outgoing requests and answer them with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def openai_body(text: Any) -> Dict[str, Any]:
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": text}}]}


def anthropic_body(text: Any) -> Dict[str, Any]:
    return {"type": "message", "content": [{"type": "text", "text": text}]}


def gemini_body(text: Any) -> Dict[str, Any]:
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


def msgs(*pairs: Tuple[str, str]) -> List[Dict[str, str]]:
    """``msgs(("system", "S"), ("user", "U"))`` -> list of message dicts."""
    return [{"role": r, "content": c} for r, c in pairs]
