"""Anthropic-style Messages adapter."""

from .adapter import AnthropicAdapter

__all__ = ["AnthropicAdapter"]
