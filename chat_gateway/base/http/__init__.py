"""HTTP utilities package for the gateway.

Exposes the async httpx client factory used by the dispatcher.
"""

from .client import build_async_client, build_timeout

__all__ = ["build_async_client", "build_timeout"]
