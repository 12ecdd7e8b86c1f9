"""Pytest configuration for the gateway test suite.

Every test runs with a clean provider environment: no API keys, no model or
base URL overrides, no external config file and no ``.env`` file, so results
never depend on the developer's shell.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import pytest

from chat_gateway.config import reset_config_cache
from chat_gateway.config.env import ENV_ALIASES
from chat_gateway.tests.utils import StubUpstream

_PROVIDER_ENV_SUFFIXES = ("MODEL", "BASE_URL", "VERSION")


@pytest.fixture(autouse=True)
def clean_gateway_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Strip gateway-related environment variables for the duration of a test."""
    for names in ENV_ALIASES.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)
    for provider in ("OPENAI", "ANTHROPIC", "GEMINI"):
        for suffix in _PROVIDER_ENV_SUFFIXES:
            monkeypatch.delenv(f"{provider}_{suffix}", raising=False)
    for name in (
        "GATEWAY_CONFIG_FILE",
        "GATEWAY_MAX_ATTEMPTS",
        "GATEWAY_MAX_CONCURRENCY",
        "GATEWAY_HTTP_TIMEOUT_SECONDS",
        "GATEWAY_CONNECT_TIMEOUT_SECONDS",
        "GATEWAY_OVERALL_TIMEOUT_SECONDS",
        "GATEWAY_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def stub_upstream() -> Callable[..., StubUpstream]:
    """Factory fixture building a :class:`StubUpstream`."""

    def _make(status_code: int = 200, body: Any = None, text: str | None = None) -> StubUpstream:
        return StubUpstream(status_code=status_code, body=body, text=text)

    return _make
