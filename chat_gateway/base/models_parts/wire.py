"""
Provider wire request/response containers.

These make adapters pure: ``encode`` returns a `WireRequest` describing the
exact HTTP call, the dispatcher performs it, and ``decode`` receives a
`WireResponse`.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx


@dataclass(frozen=True)
class WireRequest:
    """Literal HTTP request for one provider call.

    ``headers`` and ``params`` may carry the credential; never log them.
    """

    url: str
    json: Dict[str, Any]
    method: str = "POST"
    headers: Dict[str, str] = field(default_factory=dict)
    params: Dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        return f"WireRequest(method={self.method!r}, url={self.url!r})"


@dataclass(frozen=True)
class WireResponse:
    """Upstream HTTP response reduced to what adapters need.

    Attributes:
        status_code: HTTP status from the provider.
        body: Parsed JSON body, or ``None`` when the body is not JSON.
        text: Raw body text, kept for diagnostics.
    """

    status_code: int
    body: Optional[Any] = None
    text: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "WireResponse":
        text = response.text
        try:
            body = json.loads(text) if text else None
        except ValueError:
            body = None
        return cls(status_code=response.status_code, body=body, text=text)


__all__ = ["WireRequest", "WireResponse"]
