"""
Gateway Base Package

Provider-agnostic contracts, DTOs, error taxonomy and the adapter factory
shared by the provider adapters and the dispatcher:
- Interfaces: adapter and credential resolver protocols
- Models: normalized request/result and wire containers
- Factory: lazy creation of provider adapters by canonical name
"""

from .errors import ErrorKind, GatewayError, classify_exception, http_status_for, is_retryable
from .factory import AdapterFactory, UnknownProviderError
from .interfaces import CredentialResolver, ProviderAdapter
from .models import ChatMessage, ChatRequest, ChatResult, WireRequest, WireResponse
from .timeouts import TimeoutConfig, get_timeout_config
from .validation import validate_request

__all__ = [
    "ErrorKind",
    "GatewayError",
    "classify_exception",
    "http_status_for",
    "is_retryable",
    "AdapterFactory",
    "UnknownProviderError",
    "CredentialResolver",
    "ProviderAdapter",
    "ChatMessage",
    "ChatRequest",
    "ChatResult",
    "WireRequest",
    "WireResponse",
    "TimeoutConfig",
    "get_timeout_config",
    "validate_request",
]
