"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from src.infrastructure.observability import configure_structlog as _configure_structlog


def configure_structlog(environment: str | None = None) -> str:
    """Configure structlog for the given environment.

    Args:
        environment: Environment name; ENVIRONMENT (default development)
            is read when omitted.

    Returns:
        The environment name used.
    """
    resolved = environment or os.environ.get("ENVIRONMENT", "development")
    _configure_structlog(environment=resolved)
    return resolved


__all__ = ["configure_structlog"]
