"""Validated inbound DTOs."""

from .chat import ChatRequestDTO, MessageDTO

__all__ = ["ChatRequestDTO", "MessageDTO"]
