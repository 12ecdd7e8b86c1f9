"""Shared adapter behaviour.

:class:`BaseAdapter` centralizes the parts every provider adapter does the
same way: reading the layered provider configuration, choosing the model for
a request, and turning an upstream response into either text or a
``GatewayError``. Concrete adapters only implement ``encode`` and
``_extract_text``.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional

from ..config import get_provider_config
from .constants import MALFORMED_RESPONSE_MESSAGE, PROVIDER_LABELS, UPSTREAM_ERROR_MESSAGE
from .errors import ErrorKind, GatewayError, is_retryable
from .models import ChatRequest, WireRequest, WireResponse


class BaseAdapter:
    """Base class for pure provider adapters.

    Parameters:
        model: Default model for this adapter; falls back to configuration.
        base_url: API root; falls back to configuration.
        config_overrides: Extra keys merged last into the provider config.
    """

    provider: ClassVar[str] = ""

    def __init__(
        self,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        config_overrides: Optional[Mapping[str, Any]] = None,
    ) -> None:
        overrides: Dict[str, Any] = dict(config_overrides or {})
        overrides |= {"model": model, "base_url": base_url}
        self._config = get_provider_config(self.provider, overrides)
        self._model: str = self._config["model"]
        self._base_url: str = str(self._config["base_url"]).rstrip("/")

    @property
    def provider_name(self) -> str:
        return self.provider

    @property
    def label(self) -> str:
        return PROVIDER_LABELS.get(self.provider, self.provider)

    @property
    def default_model(self) -> str:
        return self._model

    def model_for(self, request: ChatRequest) -> str:
        return request.model or self._model

    def encode(self, request: ChatRequest, credential: str) -> WireRequest:  # pragma: no cover - abstract
        raise NotImplementedError

    def decode(self, response: WireResponse) -> str:
        """Return the model text from ``response`` or raise ``GatewayError``."""
        if not response.is_success:
            raise self._upstream_error(response)
        body = response.body
        if not isinstance(body, dict):
            raise self._malformed()
        try:
            text = self._extract_text(body)
        except (KeyError, IndexError, TypeError):
            raise self._malformed() from None
        if not isinstance(text, str):
            raise self._malformed()
        return self._postprocess(text)

    def _extract_text(self, body: Dict[str, Any]) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _postprocess(self, text: str) -> str:
        return text

    def _malformed(self) -> GatewayError:
        return GatewayError(
            kind=ErrorKind.MALFORMED_RESPONSE,
            message=MALFORMED_RESPONSE_MESSAGE.format(label=self.label),
            provider=self.provider,
        )

    def _upstream_error(self, response: WireResponse) -> GatewayError:
        message = _error_message(response.body) or UPSTREAM_ERROR_MESSAGE.format(label=self.label)
        return GatewayError(
            kind=ErrorKind.UPSTREAM_ERROR,
            message=message,
            provider=self.provider,
            upstream_status=response.status_code,
            retryable=is_retryable(ErrorKind.UPSTREAM_ERROR, response.status_code),
        )


def _error_message(body: Any) -> Optional[str]:
    """Best-effort ``error.message`` lookup shared by all three APIs."""
    if not isinstance(body, dict):
        return None
    err = body.get("error")
    if isinstance(err, dict):
        msg = err.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None


__all__ = ["BaseAdapter"]
