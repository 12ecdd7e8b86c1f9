"""OpenAI-style Chat Completions adapter."""

from .adapter import OpenAIAdapter

__all__ = ["OpenAIAdapter"]
