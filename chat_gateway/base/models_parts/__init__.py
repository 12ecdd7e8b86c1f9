"""Model parts package: one DTO per module, re-exported by ``base.models``."""

from .message import ROLES, ChatMessage, Role
from .chat_request import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, ChatRequest
from .chat_result import ChatResult
from .wire import WireRequest, WireResponse

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
