"""Helpers backing the FastAPI routes in ``chat_gateway.service.app``."""
