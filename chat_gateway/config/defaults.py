"""chat_gateway.config.defaults
============================

Central place for small, stable default values used across the gateway and
its service layer. These can be overridden via environment variables or the
optional external config file, but provide sensible fallbacks for local
development and tests.

This module intentionally imports nothing from the rest of the package to
avoid circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the dev server (Vite defaults).
GATEWAY_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
GATEWAY_DEFAULT_HOST = "127.0.0.1"
GATEWAY_DEFAULT_PORT = 3001


# ---- Request defaults ----
DEFAULT_TEMPERATURE = 0.25
DEFAULT_MAX_TOKENS = 4000


# ---- Dispatcher policy ----
# One upstream call per request unless explicitly raised.
GATEWAY_DEFAULT_MAX_ATTEMPTS = 1
GATEWAY_DEFAULT_RETRY_DELAY_BASE = 2.0


# ---- Provider-specific defaults ----
OPENAI_DEFAULT_MODEL = "gpt-4o"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

ANTHROPIC_DEFAULT_MODEL = "claude-sonnet-4-20250514"
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_DEFAULT_VERSION = "2023-06-01"

GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


__all__ = [
    "GATEWAY_CORS_DEFAULT_ORIGINS",
    "GATEWAY_DEFAULT_HOST",
    "GATEWAY_DEFAULT_PORT",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "GATEWAY_DEFAULT_MAX_ATTEMPTS",
    "GATEWAY_DEFAULT_RETRY_DELAY_BASE",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_DEFAULT_VERSION",
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
]
