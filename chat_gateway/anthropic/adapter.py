"""AnthropicAdapter.

Maps a normalized ``ChatRequest`` onto the Messages API
(``POST {base_url}/messages``).

Key behaviors:
* The Messages API has no ``system`` role inside ``messages``. The first
  system message becomes the top-level ``system`` field and every system
  entry is dropped from the list; the rest keep their order.
* There is no native JSON mode, so ``json_mode`` appends a fixed instruction
  to the system field (the instruction alone when no system message exists).
* Credential and API version travel in ``x-api-key`` / ``anthropic-version``.
* Models frequently wrap JSON in markdown fences; decoded text is sanitized.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base.adapter_base import BaseAdapter
from ..base.constants import JSON_MODE_INSTRUCTION
from ..base.models import ChatRequest, WireRequest
from ..base.utils import sanitize


def build_system_prompt(system: Optional[str], json_mode: bool) -> Optional[str]:
    """Return the top-level ``system`` value, or ``None`` to omit the field."""
    if not json_mode:
        return system
    if system is None:
        return JSON_MODE_INSTRUCTION.lstrip()
    return system + JSON_MODE_INSTRUCTION


class AnthropicAdapter(BaseAdapter):
    provider = "anthropic"

    @property
    def api_version(self) -> str:
        return str(self._config["version"])

    def encode(self, request: ChatRequest, credential: str) -> WireRequest:
        payload: Dict[str, Any] = {
            "model": self.model_for(request),
            "max_tokens": request.max_tokens,
            "temperature": request.temperature,
            "messages": [m.to_dict() for m in request.without_system()],
        }
        system = build_system_prompt(request.first_system(), request.json_mode)
        if system is not None:
            payload["system"] = system
        return WireRequest(
            url=f"{self._base_url}/messages",
            json=payload,
            headers={
                "Content-Type": "application/json",
                "x-api-key": credential,
                "anthropic-version": self.api_version,
            },
        )

    def _extract_text(self, body: Dict[str, Any]) -> Any:
        return body["content"][0]["text"]

    def _postprocess(self, text: str) -> str:
        return sanitize(text)


__all__ = ["AnthropicAdapter", "build_system_prompt"]
