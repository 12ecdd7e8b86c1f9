"""Focused tests for chat_gateway.base.logging.

Covers:
- _parse_level string parsing
- normalized_log_event emits required keys
- LogContext carries request shape only
- dispatcher lifecycle events never carry credentials or message text
"""
from __future__ import annotations

import asyncio
import json
import logging

import httpx

from chat_gateway.base.logging import (
    BASE_LOGGER_NAME,
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    get_logger,
    normalized_log_event,
)
from chat_gateway.base.log_support import JsonFormatter, LogContext
from chat_gateway.base.models import ChatMessage, ChatRequest
from chat_gateway.config.credentials import StaticCredentialResolver
from chat_gateway.gateway import Gateway
from chat_gateway.tests.utils import msgs, openai_body


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - exercised via tests
        self.messages.append(record.getMessage())


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_children():
    assert get_logger("dispatcher").name == "gateway.dispatcher"  # nosec B101
    assert get_logger("gateway.x").name == "gateway.x"  # nosec B101
    assert get_logger().name == BASE_LOGGER_NAME  # nosec B101


def test_normalized_log_event_emits_required_keys():
    logger = get_logger("tests.logging")
    handler = _ListHandler()
    logger.handlers[:] = [handler]
    logger.propagate = False
    try:
        normalized_log_event(
            logger,
            "chat.error",
            LogContext(provider="p", model="m"),
            phase="finalize",
            error_kind="upstream_error",
            upstream_status=500,
        )
    finally:
        logger.handlers[:] = []
        logger.propagate = True
    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["event"] == "chat.error"  # nosec B101
    assert payload["provider"] == "p"  # nosec B101
    assert payload["error_kind"] == "upstream_error"  # nosec B101
    assert payload["attempt"] is None  # nosec B101


def test_json_formatter_hoists_event_keys():
    record = logging.LogRecord("gateway", logging.INFO, __file__, 1, json.dumps({"event": "x", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "x" and out["n"] == 1  # nosec B101
    assert "msg" not in out  # nosec B101


def test_chat_lifecycle_logs_exclude_secrets_and_content():
    base = logging.getLogger(BASE_LOGGER_NAME)
    get_logger()
    handler = _ListHandler()
    base.addHandler(handler)
    previous = base.level
    base.setLevel(logging.DEBUG)

    async def _run():
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=openai_body("TOP-SECRET-REPLY")))
        async with httpx.AsyncClient(transport=transport) as client:
            gw = Gateway(StaticCredentialResolver({"openai": "sk-very-secret"}), client=client)
            return await gw.chat({"provider": "openai", "messages": msgs(("user", "private prompt"))})

    try:
        result = asyncio.run(_run())
    finally:
        base.removeHandler(handler)
        base.setLevel(previous)

    assert result.ok  # nosec B101
    events = [json.loads(m)["event"] for m in handler.messages]
    assert "chat.start" in events and "chat.end" in events  # nosec B101
    joined = "\n".join(handler.messages)
    for secret in ("sk-very-secret", "private prompt", "TOP-SECRET-REPLY"):
        assert secret not in joined  # nosec B101


def test_log_context_for_request_carries_shape_not_content():
    req = ChatRequest(
        provider="gemini",
        messages=(ChatMessage("system", "be terse"), ChatMessage("user", "secret question")),
        json_mode=True,
    )
    out = LogContext.for_request(req, "rid-1").to_dict()
    assert out == {  # nosec B101
        "provider": "gemini",
        "request_id": "rid-1",
        "message_count": 2,
        "json_mode": True,
    }
