"""Gemini-style generateContent adapter."""

from .adapter import GeminiAdapter

__all__ = ["GeminiAdapter"]
