"""In-memory stub for SignatureRepositoryProtocol.

Simulates the database behavior the services depend on:
- Unique constraint on (petition_id, email_normalized)
- Atomic confirm + counter increment (serialized by an asyncio.Lock)
- Ownership-scoped signer listing and counting

The stub is linked to a PetitionRepositoryStub, which plays the role of
the petitions table for the counter and the author_id filter.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from uuid import UUID

from src.application.ports.signature_repository import (
    ConfirmationOutcome,
    ConfirmationStatus,
)
from src.domain.errors import AlreadySignedError
from src.domain.models.signature import Signature, SignatureStatus
from src.domain.models.signer_view import SignerRecord
from src.infrastructure.stubs.petition_repository_stub import PetitionRepositoryStub


class SignatureRepositoryStub:
    """In-memory stub implementation of SignatureRepositoryProtocol.

    Attributes:
        confirm_calls: Number of confirm() invocations, for assertions.
    """

    def __init__(self, petitions: PetitionRepositoryStub | None = None) -> None:
        """Initialize empty stub.

        Args:
            petitions: Petition stub acting as the petitions table.
        """
        self._petitions = petitions or PetitionRepositoryStub()
        self._signatures: dict[UUID, Signature] = {}
        # Key: (petition_id, email_normalized), Value: signature id
        self._unique_index: dict[tuple[UUID, str], UUID] = {}
        self._lock = asyncio.Lock()
        self.confirm_calls = 0

    @property
    def petitions(self) -> PetitionRepositoryStub:
        return self._petitions

    def all_signatures(self) -> list[Signature]:
        """Return every stored signature (test helper)."""
        return list(self._signatures.values())

    async def get_by_petition_and_email(
        self,
        petition_id: UUID,
        email_normalized: str,
    ) -> Signature | None:
        signature_id = self._unique_index.get((petition_id, email_normalized))
        if signature_id is None:
            return None
        return self._signatures[signature_id]

    async def get(self, signature_id: UUID) -> Signature | None:
        return self._signatures.get(signature_id)

    async def create(self, signature: Signature) -> Signature:
        """Insert a signature, enforcing (petition_id, email_normalized) uniqueness.

        Raises:
            AlreadySignedError: A signature for this email already exists.
        """
        key = (signature.petition_id, signature.email_normalized)
        async with self._lock:
            existing_id = self._unique_index.get(key)
            if existing_id is not None:
                raise AlreadySignedError(
                    petition_id=signature.petition_id,
                    existing_signature_id=existing_id,
                )
            self._signatures[signature.id] = signature
            self._unique_index[key] = signature.id
        return signature

    async def confirm(
        self,
        signature_id: UUID,
        confirmed_at: datetime,
    ) -> ConfirmationOutcome:
        """Confirm a signature and bump its petition's counter in one step."""
        self.confirm_calls += 1
        async with self._lock:
            signature = self._signatures.get(signature_id)
            if signature is None:
                return ConfirmationOutcome(
                    status=ConfirmationStatus.NOT_FOUND,
                    signature_id=signature_id,
                )
            if signature.is_confirmed:
                return ConfirmationOutcome(
                    status=ConfirmationStatus.ALREADY_CONFIRMED,
                    signature_id=signature_id,
                    petition_id=signature.petition_id,
                )

            petition = self._petitions.get_sync(signature.petition_id)
            if petition is None:
                # Foreign key would have prevented this row from existing
                return ConfirmationOutcome(
                    status=ConfirmationStatus.NOT_FOUND,
                    signature_id=signature_id,
                )

            self._signatures[signature_id] = signature.confirm(confirmed_at)
            count = self._petitions.set_signature_count(
                petition.id, petition.signature_count + 1
            )

        return ConfirmationOutcome(
            status=ConfirmationStatus.CONFIRMED,
            signature_id=signature_id,
            petition_id=signature.petition_id,
            signature_count=count,
        )

    def _owned_confirmed(self, petition_id: UUID, caller_id: UUID) -> list[Signature]:
        petition = self._petitions.get_sync(petition_id)
        if petition is None or petition.author_id != caller_id:
            return []
        confirmed = [
            s
            for s in self._signatures.values()
            if s.petition_id == petition_id and s.status is SignatureStatus.CONFIRMED
        ]
        confirmed.sort(key=lambda s: (s.confirmed_at, str(s.id)))
        return confirmed

    async def list_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
        limit: int,
        offset: int,
    ) -> list[SignerRecord]:
        page = self._owned_confirmed(petition_id, caller_id)[offset : offset + limit]
        return [SignerRecord(name=s.name, confirmed_at=s.confirmed_at) for s in page]

    async def count_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
    ) -> int:
        return len(self._owned_confirmed(petition_id, caller_id))

    def clear(self) -> None:
        """Remove all signatures (for test isolation)."""
        self._signatures.clear()
        self._unique_index.clear()
        self.confirm_calls = 0
