"""In-memory stub for ConfirmationEmailDispatcherProtocol.

Records every message instead of sending it. Set ``fail`` to make send()
raise EmailDispatchError, to exercise the non-fatal delivery path.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from src.application.ports.email_dispatcher import EmailDispatchError
from src.domain.models.signature import mask_email

logger = get_logger()


@dataclass(frozen=True)
class SentConfirmationEmail:
    """A captured confirmation email."""

    email: str
    petition_title: str
    token: str


class ConfirmationEmailDispatcherStub:
    """Stub dispatcher that captures messages."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[SentConfirmationEmail] = []

    async def send(self, email: str, petition_title: str, token: str) -> None:
        if self.fail:
            raise EmailDispatchError("Email delivery unavailable (stub)")
        self.sent.append(
            SentConfirmationEmail(email=email, petition_title=petition_title, token=token)
        )
        logger.debug("confirmation_email_captured", email=mask_email(email))

    @property
    def last_token(self) -> str | None:
        """Token from the most recent captured message."""
        return self.sent[-1].token if self.sent else None

    def clear(self) -> None:
        self.sent.clear()
