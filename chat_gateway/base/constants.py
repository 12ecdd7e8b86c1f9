"""Base shared constants for provider adapters.

Central location for the fixed prompt strings the adapters inject and the
generic messages used in error payloads.

Security
--------
Only generic sentinel strings live here; no credentials.
"""
from __future__ import annotations

# Appended to the system instruction when a provider lacks native JSON mode.
JSON_MODE_INSTRUCTION = (
    "\n\nIMPORTANT: You must respond with valid JSON only. "
    "No additional text or markdown code blocks."
)

# Synthetic model turn that follows the emulated system prompt for providers
# whose protocol has no system role.
SYSTEM_ACKNOWLEDGEMENT = "Understood, I will follow these instructions."

NOT_CONFIGURED_MESSAGE = "{label} API key not configured"
UPSTREAM_ERROR_MESSAGE = "{label} API error"
MALFORMED_RESPONSE_MESSAGE = "{label} API returned an unexpected response shape"

SUPPORTED_PROVIDERS = ("openai", "anthropic", "gemini")

# Names accepted on input and mapped to a canonical provider key.
PROVIDER_ALIASES = {"claude": "anthropic"}

PROVIDER_LABELS = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "gemini": "Gemini",
}

__all__ = [
    "JSON_MODE_INSTRUCTION",
    "SYSTEM_ACKNOWLEDGEMENT",
    "NOT_CONFIGURED_MESSAGE",
    "UPSTREAM_ERROR_MESSAGE",
    "MALFORMED_RESPONSE_MESSAGE",
    "SUPPORTED_PROVIDERS",
    "PROVIDER_ALIASES",
    "PROVIDER_LABELS",
]
