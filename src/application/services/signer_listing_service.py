"""Signer listing service.

Serves a redacted, paginated list of confirmed signers to the petition's
author and to nobody else.

Authorization is a filter, not a check: the ownership predicate travels
into both repository queries, so a caller who does not own the petition
receives exactly what an owner of a petition with no signers receives.
There is no separate "does this petition exist / who owns it" lookup that
could be probed.

Developer Golden Rules:
1. AUTHENTICATE FIRST - No credential and a bad credential are the same 401
2. CLAMP, DON'T REJECT - limit into [1, max], offset to >= 0
3. CONFIRMED ONLY - Unconfirmed signatures are never listed or counted
4. THREE FIELDS - first name token, verified, confirmed_at; nothing else
5. TOTAL IS ITS OWN QUERY - never len(page)
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from src.domain.errors import InternalServiceError, UnauthorizedError
from src.domain.models.signer_view import SignerView

if TYPE_CHECKING:
    from src.application.ports.credential_verifier import (
        CallerIdentity,
        CredentialVerifierProtocol,
    )
    from src.application.ports.signature_repository import (
        SignatureRepositoryProtocol,
    )

logger = get_logger(__name__)

DEFAULT_SIGNER_PAGE_SIZE = 50
MAX_SIGNER_PAGE_SIZE = 200
# Fits a PostgreSQL int4; any larger offset is past every petition's signers.
MAX_SIGNER_OFFSET = 2**31 - 1


@dataclass(frozen=True)
class SignerPage:
    """One page of redacted signers.

    Attributes:
        signers: Redacted signers on this page.
        total: Confirmed signers visible to the caller, independent of paging.
        limit: Effective page size used.
        offset: Effective offset used.
    """

    signers: list[SignerView]
    total: int
    limit: int
    offset: int


def clamp_pagination(
    limit: int | None,
    offset: int | None,
    default_limit: int = DEFAULT_SIGNER_PAGE_SIZE,
    max_limit: int = MAX_SIGNER_PAGE_SIZE,
) -> tuple[int, int]:
    """Clamp requested paging to the served range.

    Args:
        limit: Requested page size, or None for the default.
        offset: Requested offset, or None for 0.
        default_limit: Page size used when none is requested.
        max_limit: Hard cap on page size.

    Returns:
        (limit, offset) with limit in [1, max_limit] and offset in
        [0, MAX_SIGNER_OFFSET].
    """
    effective_limit = default_limit if limit is None else limit
    effective_limit = max(1, min(effective_limit, max_limit))
    effective_offset = max(0, min(offset or 0, MAX_SIGNER_OFFSET))
    return effective_limit, effective_offset


class SignerListingService:
    """Service for listing a petition's confirmed signers to its author."""

    def __init__(
        self,
        signature_repo: SignatureRepositoryProtocol,
        credential_verifier: CredentialVerifierProtocol,
        default_limit: int = DEFAULT_SIGNER_PAGE_SIZE,
        max_limit: int = MAX_SIGNER_PAGE_SIZE,
    ) -> None:
        """Initialize the signer listing service.

        Args:
            signature_repo: Signature persistence with ownership-scoped queries.
            credential_verifier: Bearer credential verification.
            default_limit: Page size when none is requested.
            max_limit: Hard cap on page size.
        """
        self._signature_repo = signature_repo
        self._credential_verifier = credential_verifier
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def authenticate(self, credential: str | None) -> CallerIdentity:
        """Resolve a bearer credential to a caller identity.

        Raises:
            UnauthorizedError: Credential missing or not valid.
            InternalServiceError: The identity provider could not be reached.
        """
        if not credential:
            logger.warning("auth_failed", reason="missing_credential")
            raise UnauthorizedError()

        try:
            identity = await self._credential_verifier.verify(credential)
        except Exception as e:
            logger.exception("credential_verification_failed", error_type=type(e).__name__)
            raise InternalServiceError("credential_verification") from e

        if identity is None:
            logger.warning("auth_failed", reason="invalid_credential")
            raise UnauthorizedError()
        return identity

    async def list_signers(
        self,
        petition_id: UUID,
        credential: str | None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SignerPage:
        """List the confirmed signers of a petition the caller owns.

        Args:
            petition_id: The petition whose signers are requested.
            credential: Bearer credential from the request, if any.
            limit: Requested page size.
            offset: Requested offset.

        Returns:
            SignerPage; empty with total 0 when the caller is not the owner.

        Raises:
            UnauthorizedError: Credential missing or not valid.
            InternalServiceError: The store or identity provider failed.
        """
        caller = await self.authenticate(credential)
        return await self.list_signers_for(caller, petition_id, limit=limit, offset=offset)

    async def list_signers_for(
        self,
        caller: CallerIdentity,
        petition_id: UUID,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SignerPage:
        """List signers for an already authenticated caller.

        Raises:
            InternalServiceError: The store failed.
        """
        effective_limit, effective_offset = clamp_pagination(
            limit, offset, self._default_limit, self._max_limit
        )
        log = logger.bind(
            petition_id=str(petition_id),
            caller_id=str(caller.user_id),
            limit=effective_limit,
            offset=effective_offset,
        )

        try:
            records, total = await asyncio.gather(
                self._signature_repo.list_confirmed_signers(
                    petition_id,
                    caller.user_id,
                    limit=effective_limit,
                    offset=effective_offset,
                ),
                self._signature_repo.count_confirmed_signers(
                    petition_id,
                    caller.user_id,
                ),
            )
        except Exception as e:
            log.exception("signer_listing_failed", error_type=type(e).__name__)
            raise InternalServiceError("list_signers") from e

        log.debug("signer_listing_served", returned=len(records), total=total)

        return SignerPage(
            signers=[SignerView.from_record(record) for record in records],
            total=total,
            limit=effective_limit,
            offset=effective_offset,
        )
