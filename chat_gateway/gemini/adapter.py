"""GeminiAdapter.

Maps a normalized ``ChatRequest`` onto ``generateContent``
(``POST {base_url}/models/{model}:generateContent?key=...``).

Key behaviors:
* Roles are ``user`` and ``model`` only: ``assistant`` becomes ``model``,
  everything else ``user``.
* System instructions are emulated with a synthetic ``user`` turn holding
  the first system message, followed by a synthetic ``model``
  acknowledgement, both placed ahead of the conversation.
* ``json_mode`` sets ``responseMimeType`` and also appends the JSON
  instruction to the emulated system turn.
* The credential is a query parameter, never a header.
* The model id is percent-encoded as a single path segment.
"""

from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

from ..base.adapter_base import BaseAdapter
from ..base.constants import JSON_MODE_INSTRUCTION, SYSTEM_ACKNOWLEDGEMENT
from ..base.models import ChatMessage, ChatRequest, WireRequest


def _content(role: str, text: str) -> Dict[str, Any]:
    return {"role": role, "parts": [{"text": text}]}


def to_gemini_contents(request: ChatRequest) -> List[Dict[str, Any]]:
    """Return the ``contents`` array for ``request``."""
    contents: List[Dict[str, Any]] = []
    system = request.first_system()
    if system:
        if request.json_mode:
            system += JSON_MODE_INSTRUCTION
        contents.append(_content("user", system))
        contents.append(_content("model", SYSTEM_ACKNOWLEDGEMENT))
    contents.extend(_content(_gemini_role(m), m.content) for m in request.without_system())
    return contents


def _gemini_role(message: ChatMessage) -> str:
    return "model" if message.role == "assistant" else "user"


class GeminiAdapter(BaseAdapter):
    provider = "gemini"

    def encode(self, request: ChatRequest, credential: str) -> WireRequest:
        generation_config: Dict[str, Any] = {
            "temperature": request.temperature,
            "maxOutputTokens": request.max_tokens,
        }
        if request.json_mode:
            generation_config["responseMimeType"] = "application/json"
        return WireRequest(
            url=f"{self._base_url}/models/{quote(self.model_for(request), safe='')}:generateContent",
            json={
                "contents": to_gemini_contents(request),
                "generationConfig": generation_config,
            },
            headers={"Content-Type": "application/json"},
            params={"key": credential},
        )

    def _extract_text(self, body: Dict[str, Any]) -> Any:
        return body["candidates"][0]["content"]["parts"][0]["text"]


__all__ = ["GeminiAdapter", "to_gemini_contents"]
