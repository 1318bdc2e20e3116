"""Signature repository protocol.

Separates persistence from the intake, confirmation and listing logic.
Implementations must provide three storage guarantees the services rely on:

1. (petition_id, email_normalized) is unique; ``create`` raises
   AlreadySignedError when the constraint fires.
2. ``confirm`` is one atomic unit: the unconfirmed -> confirmed transition
   and the petition counter increment commit together or not at all, and
   concurrent calls for the same signature transition it exactly once.
3. Listing and counting apply the ownership predicate inside the query, so
   a non-owner gets the same empty answer as an owner with no signers.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol
from uuid import UUID

from src.domain.models.signature import Signature
from src.domain.models.signer_view import SignerRecord


class ConfirmationStatus(Enum):
    """Outcome of an atomic confirmation attempt."""

    CONFIRMED = "confirmed"
    ALREADY_CONFIRMED = "already_confirmed"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ConfirmationOutcome:
    """Result of SignatureRepositoryProtocol.confirm.

    Attributes:
        status: What the transaction observed and did.
        signature_id: The signature that was addressed.
        petition_id: Parent petition, when the signature exists.
        signature_count: Petition counter after the increment, when CONFIRMED.
    """

    status: ConfirmationStatus
    signature_id: UUID
    petition_id: UUID | None = None
    signature_count: int | None = None


class SignatureRepositoryProtocol(Protocol):
    """Repository protocol for signature persistence."""

    @abstractmethod
    async def get_by_petition_and_email(
        self,
        petition_id: UUID,
        email_normalized: str,
    ) -> Signature | None:
        """Find a signature of any status for (petition, normalized email)."""
        ...

    @abstractmethod
    async def get(self, signature_id: UUID) -> Signature | None:
        """Get a signature by id."""
        ...

    @abstractmethod
    async def create(self, signature: Signature) -> Signature:
        """Insert a new unconfirmed signature.

        Args:
            signature: The signature to store.

        Returns:
            The stored signature.

        Raises:
            AlreadySignedError: Uniqueness constraint on
                (petition_id, email_normalized) rejected the insert.
        """
        ...

    @abstractmethod
    async def confirm(
        self,
        signature_id: UUID,
        confirmed_at: datetime,
    ) -> ConfirmationOutcome:
        """Atomically confirm a signature and increment its petition's counter.

        Within one transaction:
        1. Load the signature; NOT_FOUND if absent
        2. If already confirmed, change nothing; ALREADY_CONFIRMED
        3. Else set status confirmed and confirmed_at, increment
           petitions.signature_count by exactly 1; CONFIRMED

        Args:
            signature_id: Signature named by the redeemed token.
            confirmed_at: Confirmation timestamp (UTC).

        Returns:
            ConfirmationOutcome describing what happened.
        """
        ...

    @abstractmethod
    async def list_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
        limit: int,
        offset: int,
    ) -> list[SignerRecord]:
        """List confirmed signers of a petition owned by ``caller_id``.

        Ordered by confirmed_at ascending, then id. Empty when the caller
        does not own the petition.
        """
        ...

    @abstractmethod
    async def count_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
    ) -> int:
        """Count confirmed signers of a petition owned by ``caller_id``.

        Uses the same ownership-scoped filter as list_confirmed_signers;
        0 when the caller does not own the petition.
        """
        ...
