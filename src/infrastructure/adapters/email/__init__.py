"""Email delivery adapters."""

from src.infrastructure.adapters.email.http_email_dispatcher import (
    HttpConfirmationEmailDispatcher,
    build_confirmation_link,
)

__all__: list[str] = ["HttpConfirmationEmailDispatcher", "build_confirmation_link"]
