"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized shape to a provider wire request. Instances are
produced by the validator and are immutable for the duration of a call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ...config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from .message import ChatMessage


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request sent to provider adapters.

    Attributes:
        provider: Canonical provider key (``openai``, ``anthropic``, ``gemini``).
        messages: Ordered, non-empty tuple of `ChatMessage` instances.
        json_mode: Ask the model for machine-parseable JSON only.
        temperature: Sampling temperature in [0, 2].
        max_tokens: Completion token cap (> 0).
        model: Optional model override; adapters fall back to the configured
            default when ``None``.
    """

    provider: str
    messages: Tuple[ChatMessage, ...]
    json_mode: bool = False
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    model: Optional[str] = None

    def first_system(self) -> Optional[str]:
        """Return the content of the first ``system`` message, if any.

        Later system messages are ignored by every adapter.
        """
        for m in self.messages:
            if m.is_system:
                return m.content
        return None

    def without_system(self) -> Tuple[ChatMessage, ...]:
        """Return the messages with every ``system`` entry removed, order kept."""
        return tuple(m for m in self.messages if not m.is_system)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "provider": self.provider,
            "messages": [m.to_dict() for m in self.messages],
            "jsonMode": self.json_mode,
            "temperature": self.temperature,
            "maxTokens": self.max_tokens,
            "model": self.model,
        }


__all__ = ["ChatRequest", "DEFAULT_TEMPERATURE", "DEFAULT_MAX_TOKENS"]
