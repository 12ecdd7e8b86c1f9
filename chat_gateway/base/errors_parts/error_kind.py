"""
Normalized gateway error kinds (taxonomy).

Defines the `ErrorKind` enumeration shared by the validator, the provider
adapters, the dispatcher and the HTTP service. Values are lowercase
snake_case and are considered a stable public contract for logging and for
callers that branch on the failure category.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerated failure categories surfaced to gateway callers.

    - ``INVALID_REQUEST``: malformed caller input; never retryable.
    - ``NOT_CONFIGURED``: credential missing for the selected provider; never
      retryable, actionable by an operator.
    - ``UPSTREAM_ERROR``: provider answered with a non-success HTTP status.
    - ``MALFORMED_RESPONSE``: provider answered 2xx with an unexpected body
      shape (protocol drift); not retryable.
    - ``TRANSPORT_ERROR``: network or timeout failure; retryable.
    """

    INVALID_REQUEST = "invalid_request"
    NOT_CONFIGURED = "not_configured"
    UPSTREAM_ERROR = "upstream_error"
    MALFORMED_RESPONSE = "malformed_response"
    TRANSPORT_ERROR = "transport_error"


__all__ = ["ErrorKind"]
