"""Small pure helpers shared across adapters."""

from .sanitize import sanitize

__all__ = ["sanitize"]
