"""chat_gateway package

Multi-provider LLM chat gateway: one provider-agnostic chat request in, one
normalized result out, whichever of the OpenAI-style, Anthropic-style or
Gemini-style APIs served it.

Public API (re-exported):
    - Version: ``__version__``
    - Entry point: :class:`Gateway` (``await Gateway(resolver).chat(payload)``)
    - Models: :class:`ChatRequest`, :class:`ChatMessage`, :class:`ChatResult`
    - Errors: :class:`GatewayError`, :class:`ErrorKind`
    - Credentials: :class:`EnvCredentialResolver`, :class:`StaticCredentialResolver`
    - Helpers: :func:`validate_request`, :func:`sanitize`
"""

from .base.errors import ErrorKind, GatewayError
from .base.models import ChatMessage, ChatRequest, ChatResult
from .base.utils import sanitize
from .base.validation import validate_request
from .config.credentials import EnvCredentialResolver, StaticCredentialResolver
from .gateway import Gateway

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Gateway",
    "ChatMessage",
    "ChatRequest",
    "ChatResult",
    "ErrorKind",
    "GatewayError",
    "EnvCredentialResolver",
    "StaticCredentialResolver",
    "validate_request",
    "sanitize",
]
