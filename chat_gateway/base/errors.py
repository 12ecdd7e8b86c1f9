"""Unified gateway error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chat_gateway.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_kind import ErrorKind
from .errors_parts.gateway_error import GatewayError
from .errors_parts.classification import classify_exception, error_from_exception, http_status_for, is_retryable

__all__ = ["ErrorKind", "GatewayError", "classify_exception", "error_from_exception", "http_status_for", "is_retryable"]
