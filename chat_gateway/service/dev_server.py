from __future__ import annotations

import os
from typing import Optional

import uvicorn

from chat_gateway.config.defaults import GATEWAY_DEFAULT_HOST, GATEWAY_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to a sane default."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def main(host: Optional[str] = None, port: Optional[int] = None, reload: Optional[bool] = None) -> None:
    """Start the development server for the gateway FastAPI app.

    Host/port and reload behavior come from the arguments when given, else
    from the environment:

    - GATEWAY_HOST: interface to bind (default "127.0.0.1")
    - GATEWAY_PORT: port to bind (default 3001)
    - GATEWAY_RELOAD: "true"/"false" to toggle auto-reload (default False)

    Configured providers are logged by the app lifespan on startup.
    """
    host = host or os.getenv("GATEWAY_HOST", GATEWAY_DEFAULT_HOST)
    if port is None:
        port = _parse_port(os.getenv("GATEWAY_PORT"), GATEWAY_DEFAULT_PORT)
    if reload is None:
        reload = (os.getenv("GATEWAY_RELOAD") or "").lower() == "true"

    uvicorn.run(
        "chat_gateway.service.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
