"""API middleware."""

from src.api.middleware.logging_middleware import LoggingMiddleware

__all__: list[str] = ["LoggingMiddleware"]
