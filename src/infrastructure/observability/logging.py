"""Structured logging configuration with structlog.

Production emits one JSON object per line; development uses the console
renderer.

Log Entry Format:
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "signature_confirmed",
        "correlation_id": "uuid",
        "service": "petition-signatures",
        ...additional context
    }

Confirmation tokens and signing secrets are bearer material: the
redaction processor drops them if a call site ever passes one, and
plain email addresses are masked.

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from src.domain.models.signature import mask_email
from src.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
SERVICE_NAME = "petition-signatures"

REDACTED_KEYS = frozenset({"token", "signing_secret", "secret", "authorization"})
EMAIL_KEYS = frozenset({"email", "to"})


def _get_log_level() -> int:
    """Get the configured log level from the LOG_LEVEL environment variable."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def redact_sensitive_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor removing bearer material and masking addresses."""
    for key in REDACTED_KEYS & event_dict.keys():
        event_dict[key] = "[REDACTED]"
    for key in EMAIL_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str) and "***" not in value:
            event_dict[key] = mask_email(value)
    return event_dict


def add_service_name(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the application.

    Should be called once at application startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        cast(Processor, add_service_name),
        cast(Processor, redact_sensitive_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
