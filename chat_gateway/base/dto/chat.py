"""
Pydantic DTOs for inbound chat payloads.

Purpose
-------
Validate the raw JSON body a caller sends before anything touches a provider
adapter: provider is known, messages are present and well-formed, numeric
parameters are within bounds.

External dependencies: Pydantic only (no network calls).

Failure semantics
-----------------
Validation either succeeds or raises ``pydantic.ValidationError``; the
validator module converts that into ``ErrorKind.INVALID_REQUEST``.

Field names accept both the camelCase spelling used by the browser caller
(``jsonMode``, ``maxTokens``) and snake_case.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from ..constants import PROVIDER_ALIASES
from ..models_parts.chat_request import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

Role = Literal["system", "user", "assistant"]
Provider = Literal["openai", "anthropic", "gemini"]

# Model ids are interpolated into upstream URL paths (Gemini), so path and
# query delimiters are rejected.
MODEL_ID_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9._:-]*$"


class MessageDTO(BaseModel):
    """A single chat message.

    Rules:
        - ``role`` must be one of ``system``, ``user``, ``assistant``.
        - ``content`` must be a string; the empty string is allowed because
          some providers accept it. ``null`` is rejected.
    """

    model_config = ConfigDict(extra="ignore")

    role: Role
    content: StrictStr


class ChatRequestDTO(BaseModel):
    """Inbound chat request with validation.

    Parameters:
        provider: ``openai``, ``anthropic`` or ``gemini`` (case-insensitive;
            ``claude`` is accepted as an alias of ``anthropic``).
        messages: Ordered, non-empty list of `MessageDTO`.
        json_mode: Request JSON-only output (alias ``jsonMode``).
        temperature: Within [0.0, 2.0].
        max_tokens: Positive completion cap (alias ``maxTokens``).
        model: Optional model override (non-empty when given).

    Raises:
        ValidationError: On unknown provider, empty messages, bad roles,
            non-string content, out-of-range parameters
            or a model id containing URL delimiters.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", protected_namespaces=())

    provider: Provider
    messages: List[MessageDTO] = Field(..., min_length=1)
    json_mode: StrictBool = Field(default=False, alias="jsonMode")
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0, alias="maxTokens")
    model: Optional[str] = Field(default=None, min_length=1, pattern=MODEL_ID_PATTERN)

    @field_validator("provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: object) -> object:
        """Lowercase and de-alias the provider before the literal check."""
        if isinstance(value, str):
            name = value.strip().lower()
            return PROVIDER_ALIASES.get(name, name)
        return value


__all__ = [
    "Role",
    "Provider",
    "MODEL_ID_PATTERN",
    "MessageDTO",
    "ChatRequestDTO",
]
