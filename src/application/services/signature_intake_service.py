"""Signature intake service.

Accepts a signing request for a public petition and creates exactly one
unconfirmed signature per (petition, normalized email), then sends the
signer a confirmation link.

Developer Golden Rules:
1. PUBLIC ONLY - Missing and non-public petitions both report not found
2. DEDUPLICATE - Check first for a clear 409, let the storage constraint close the race
3. RECORD BEFORE SEND - The signature exists before any email leaves
4. EMAIL IS BEST EFFORT - Dispatch failures are logged, never raised
5. AUDIT DATA STAYS IN - ip and user_agent are stored, never returned
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from src.domain.errors import (
    AlreadySignedError,
    InternalServiceError,
    PetitionNotFoundError,
)
from src.domain.models.signature import (
    Signature,
    SignatureStatus,
    mask_email,
    normalize_email,
)

if TYPE_CHECKING:
    from src.application.ports.confirmation_token import (
        ConfirmationTokenCodecProtocol,
    )
    from src.application.ports.email_dispatcher import (
        ConfirmationEmailDispatcherProtocol,
    )
    from src.application.ports.petition_repository import PetitionRepositoryProtocol
    from src.application.ports.signature_repository import (
        SignatureRepositoryProtocol,
    )
    from src.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)

SIGNATURE_PENDING_MESSAGE = "Please check your email to confirm your signature"


@dataclass(frozen=True)
class SignatureIntakeResult:
    """Result of a successful signature submission.

    Attributes:
        signature_id: The new unconfirmed signature.
        petition_id: The petition that was signed.
        email_sent: Whether the confirmation email was handed off.
        message: Acknowledgment shown to the signer.
    """

    signature_id: UUID
    petition_id: UUID
    email_sent: bool
    message: str = SIGNATURE_PENDING_MESSAGE


class SignatureIntakeService:
    """Service for submitting signatures on petitions.

    The service ensures:
    1. Petition exists and is public
    2. Email is normalized before any lookup
    3. No signature of any status exists for (petition, normalized email)
    4. The unconfirmed signature is persisted with its audit data
    5. A confirmation token is minted for the new signature
    6. The confirmation email is dispatched, failures only logged

    Example:
        >>> service = SignatureIntakeService(
        ...     petition_repo=petition_repo,
        ...     signature_repo=signature_repo,
        ...     token_codec=token_codec,
        ...     email_dispatcher=email_dispatcher,
        ...     time_authority=time_authority,
        ... )
        >>> result = await service.submit_signature(
        ...     petition_id=petition_id,
        ...     name="Jane Doe",
        ...     email="Jane@Example.org",
        ... )
    """

    def __init__(
        self,
        petition_repo: PetitionRepositoryProtocol,
        signature_repo: SignatureRepositoryProtocol,
        token_codec: ConfirmationTokenCodecProtocol,
        email_dispatcher: ConfirmationEmailDispatcherProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        """Initialize the signature intake service.

        Args:
            petition_repo: Read access to petitions.
            signature_repo: Signature persistence.
            token_codec: Confirmation token codec.
            email_dispatcher: Confirmation email delivery.
            time_authority: Source of created_at timestamps.
        """
        self._petition_repo = petition_repo
        self._signature_repo = signature_repo
        self._token_codec = token_codec
        self._email_dispatcher = email_dispatcher
        self._time = time_authority

    async def submit_signature(
        self,
        petition_id: UUID,
        name: str,
        email: str,
        comment: str | None = None,
        ip: str | None = None,
        user_agent: str | None = None,
    ) -> SignatureIntakeResult:
        """Submit a signature on a petition.

        Args:
            petition_id: The petition to sign.
            name: Signer display name (already validated, 2-200 chars).
            email: Signer address (already validated).
            comment: Optional comment (at most 1000 chars).
            ip: Client address, stored for audit.
            user_agent: Client user agent, stored for audit.

        Returns:
            SignatureIntakeResult for the new unconfirmed signature.

        Raises:
            PetitionNotFoundError: Petition missing or not public.
            AlreadySignedError: This email already signed this petition.
            InternalServiceError: The store failed.
        """
        email_normalized = normalize_email(email)
        log = logger.bind(
            petition_id=str(petition_id),
            email=mask_email(email_normalized),
        )
        log.info("signature_submission_started")

        # Step 1: Petition must exist and be open for signing
        try:
            petition = await self._petition_repo.get(petition_id)
        except Exception as e:
            log.exception("petition_lookup_failed", error_type=type(e).__name__)
            raise InternalServiceError("petition_lookup") from e

        if petition is None or not petition.status.accepts_signatures():
            log.warning(
                "signature_rejected_petition_unavailable",
                petition_status=petition.status.value if petition else None,
            )
            raise PetitionNotFoundError(petition_id)

        # Step 2: Best-effort duplicate check; the unique constraint is the real guard
        try:
            existing = await self._signature_repo.get_by_petition_and_email(
                petition_id, email_normalized
            )
        except Exception as e:
            log.exception("duplicate_check_failed", error_type=type(e).__name__)
            raise InternalServiceError("duplicate_check") from e

        if existing is not None:
            log.info(
                "duplicate_signature_attempt",
                existing_signature_id=str(existing.id),
                existing_status=existing.status.value,
                detection_method="pre_persistence_check",
            )
            raise AlreadySignedError(
                petition_id=petition_id,
                existing_signature_id=existing.id,
            )

        # Step 3: Persist the unconfirmed signature
        signature = Signature(
            id=uuid4(),
            petition_id=petition_id,
            name=name.strip(),
            email=email.strip(),
            email_normalized=email_normalized,
            comment=comment,
            ip=ip,
            user_agent=user_agent,
            status=SignatureStatus.UNCONFIRMED,
            created_at=self._time.utcnow(),
        )
        try:
            signature = await self._signature_repo.create(signature)
        except AlreadySignedError:
            log.warning(
                "duplicate_signature_constraint_violation",
                detection_method="database_constraint",
            )
            raise
        except Exception as e:
            log.exception("signature_insert_failed", error_type=type(e).__name__)
            raise InternalServiceError("signature_insert") from e

        log = log.bind(signature_id=str(signature.id))

        # Step 4: Mint the confirmation token
        token = self._token_codec.issue(signature.id, petition_id)

        # Step 5: Dispatch the confirmation email. The signature stays either way;
        # a resend happens outside this request.
        email_sent = True
        try:
            await self._email_dispatcher.send(signature.email, petition.title, token)
        except Exception as e:
            email_sent = False
            log.error(
                "confirmation_email_failed",
                error=str(e),
                error_type=type(e).__name__,
            )

        log.info("signature_submission_completed", email_sent=email_sent)

        return SignatureIntakeResult(
            signature_id=signature.id,
            petition_id=petition_id,
            email_sent=email_sent,
        )
