"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chat_gateway.base.errors` for the stable surface.
"""

from .error_kind import ErrorKind
from .gateway_error import GatewayError
from .classification import classify_exception, error_from_exception, http_status_for, is_retryable

__all__ = ["ErrorKind", "GatewayError", "classify_exception", "error_from_exception", "http_status_for", "is_retryable"]
