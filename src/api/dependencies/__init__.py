"""API dependencies for dependency injection."""

from src.api.dependencies.signatures import (
    get_authenticated_caller,
    get_catalog_service,
    get_client_ip,
    get_config,
    get_confirmation_service,
    get_intake_service,
    get_listing_service,
    get_metrics,
    get_user_agent,
)

__all__: list[str] = [
    "get_authenticated_caller",
    "get_catalog_service",
    "get_client_ip",
    "get_config",
    "get_confirmation_service",
    "get_intake_service",
    "get_listing_service",
    "get_metrics",
    "get_user_agent",
]
