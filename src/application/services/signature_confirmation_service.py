"""Signature confirmation service.

Redeems a confirmation token exactly once: the referenced signature moves
from unconfirmed to confirmed and its petition's signature_count grows by
one, in a single store transaction.

Single use is enforced by the signature's own status, checked and set
inside that transaction. There is no consumed-token ledger. A second
redemption, whether a retry, a duplicated request or a concurrent racer,
observes the confirmed status and gets SignatureAlreadyConfirmedError with
the counter untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from src.application.ports.signature_repository import ConfirmationStatus
from src.domain.errors import (
    InternalServiceError,
    InvalidConfirmationTokenError,
    SignatureAlreadyConfirmedError,
    SignatureNotFoundError,
)

if TYPE_CHECKING:
    from src.application.ports.confirmation_token import (
        ConfirmationTokenCodecProtocol,
    )
    from src.application.ports.signature_repository import (
        SignatureRepositoryProtocol,
    )
    from src.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)


@dataclass(frozen=True)
class SignatureConfirmationResult:
    """Result of a successful confirmation.

    Attributes:
        signature_id: The signature that was confirmed.
        petition_id: Its petition, for the redirect.
        signature_count: Petition counter after this confirmation, if reported.
    """

    signature_id: UUID
    petition_id: UUID
    signature_count: int | None = None


class SignatureConfirmationService:
    """Service for redeeming signature confirmation tokens."""

    def __init__(
        self,
        signature_repo: SignatureRepositoryProtocol,
        token_codec: ConfirmationTokenCodecProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize the confirmation service.

        Args:
            signature_repo: Signature persistence providing the atomic confirm.
            token_codec: Confirmation token codec.
            time_authority: Source of confirmed_at timestamps.
        """
        self._signature_repo = signature_repo
        self._token_codec = token_codec
        self._time = time_authority

    async def confirm(self, token: str | None) -> SignatureConfirmationResult:
        """Redeem a confirmation token.

        Args:
            token: Token from the confirmation link.

        Returns:
            SignatureConfirmationResult naming the confirmed signature.

        Raises:
            InvalidConfirmationTokenError: Token missing, malformed, tampered or expired.
            SignatureNotFoundError: Token names a signature that does not exist.
            SignatureAlreadyConfirmedError: Signature was already confirmed.
            InternalServiceError: The store transaction failed.
        """
        if not token:
            logger.info("confirmation_rejected", reason="missing_token")
            raise InvalidConfirmationTokenError("Missing confirmation token")

        payload = self._token_codec.verify(token)
        if payload is None:
            raise InvalidConfirmationTokenError()

        log = logger.bind(
            signature_id=str(payload.signature_id),
            petition_id=str(payload.petition_id),
        )

        try:
            outcome = await self._signature_repo.confirm(
                payload.signature_id,
                confirmed_at=self._time.utcnow(),
            )
        except Exception as e:
            log.exception("confirmation_transaction_failed", error_type=type(e).__name__)
            raise InternalServiceError("confirm_signature") from e

        if outcome.status is ConfirmationStatus.NOT_FOUND:
            log.warning("confirmation_rejected", reason="signature_not_found")
            raise SignatureNotFoundError(payload.signature_id)

        if outcome.status is ConfirmationStatus.ALREADY_CONFIRMED:
            log.info("confirmation_rejected", reason="already_confirmed")
            raise SignatureAlreadyConfirmedError(payload.signature_id)

        log.info("signature_confirmed", signature_count=outcome.signature_count)

        return SignatureConfirmationResult(
            signature_id=payload.signature_id,
            petition_id=outcome.petition_id or payload.petition_id,
            signature_count=outcome.signature_count,
        )
