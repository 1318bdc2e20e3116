"""Observability infrastructure: structured logging and correlation IDs.

Usage:
    from src.infrastructure.observability import (
        configure_structlog,
        get_correlation_id,
        set_correlation_id,
    )

    # At startup
    configure_structlog(environment="production")

    # In request handling
    set_correlation_id(request_correlation_id)
"""

from src.infrastructure.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import (
    configure_structlog,
    redact_sensitive_processor,
)

__all__: list[str] = [
    "CORRELATION_ID_HEADER",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "redact_sensitive_processor",
    "set_correlation_id",
]
