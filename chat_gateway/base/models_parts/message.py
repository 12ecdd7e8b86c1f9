"""
Message DTO used across adapters.

Defines the `ChatMessage` dataclass and the `Role` literal. Order of messages
within a request is conversation turn order and is preserved end-to-end.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal

# Message roles accepted by the gateway.
Role = Literal["system", "user", "assistant"]

ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """A provider-agnostic chat message.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text content. May be empty; never ``None``.
    """

    role: Role
    content: str

    @property
    def is_system(self) -> bool:
        return self.role == "system"

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


__all__ = ["ChatMessage", "Role", "ROLES"]
