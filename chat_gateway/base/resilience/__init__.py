"""Resilience helpers (retry policy)."""

from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, get_retry_config, retry_async

__all__ = ["RetryConfig", "DEFAULT_RETRY_CONFIG", "get_retry_config", "retry_async"]
