"""OpenAIAdapter.

Maps a normalized ``ChatRequest`` onto the Chat Completions API
(``POST {base_url}/chat/completions``).

Key behaviors:
* Messages go out unchanged: system role included, original order.
* ``json_mode`` uses the native ``response_format`` switch.
* The credential travels in ``Authorization: Bearer``.
* Decoded text is returned as-is (no fence stripping).
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.adapter_base import BaseAdapter
from ..base.models import ChatRequest, WireRequest


class OpenAIAdapter(BaseAdapter):
    provider = "openai"

    def encode(self, request: ChatRequest, credential: str) -> WireRequest:
        payload: Dict[str, Any] = {
            "model": self.model_for(request),
            "messages": [m.to_dict() for m in request.messages],
            "temperature": request.temperature,
            "max_tokens": request.max_tokens,
        }
        if request.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return WireRequest(
            url=f"{self._base_url}/chat/completions",
            json=payload,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {credential}",
            },
        )

    def _extract_text(self, body: Dict[str, Any]) -> Any:
        return body["choices"][0]["message"]["content"]


__all__ = ["OpenAIAdapter"]
