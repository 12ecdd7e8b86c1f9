"""Normalized gateway models public surface.

Re-exports the one-class-per-file DTOs under ``base.models_parts``.
"""
from __future__ import annotations

from .models_parts import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    ROLES,
    ChatMessage,
    ChatRequest,
    ChatResult,
    Role,
    WireRequest,
    WireResponse,
)

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatRequest",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "ChatResult",
    "WireRequest",
    "WireResponse",
]
