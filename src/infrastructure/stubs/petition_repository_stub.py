"""In-memory stub for PetitionRepositoryProtocol.

Holds petitions in a dict keyed by id. The signature repository stub
shares this instance so the confirmation path can increment
signature_count the way the SQL transaction does.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.models.petition import Petition, PetitionStatus


class PetitionRepositoryStub:
    """In-memory stub implementation of PetitionRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize empty stub."""
        self._petitions: dict[UUID, Petition] = {}

    def add_petition(self, petition: Petition) -> Petition:
        """Store a petition (test setup helper).

        Args:
            petition: The petition to store; replaces any with the same id.

        Returns:
            The stored petition.
        """
        self._petitions[petition.id] = petition
        return petition

    def set_signature_count(self, petition_id: UUID, signature_count: int) -> int:
        """Overwrite a petition's counter. Used by the confirmation path.

        Raises:
            KeyError: If the petition does not exist.
        """
        petition = self._petitions[petition_id]
        self._petitions[petition_id] = petition.with_signature_count(signature_count)
        return signature_count

    def get_sync(self, petition_id: UUID) -> Petition | None:
        return self._petitions.get(petition_id)

    async def get(self, petition_id: UUID) -> Petition | None:
        return self._petitions.get(petition_id)

    async def get_public_by_slug(self, slug: str) -> Petition | None:
        for petition in self._petitions.values():
            if petition.slug == slug and petition.status is PetitionStatus.PUBLIC:
                return petition
        return None

    async def list_public(self, limit: int) -> list[Petition]:
        public = [
            p for p in self._petitions.values() if p.status is PetitionStatus.PUBLIC
        ]
        # created_at DESC, id ASC
        public.sort(key=lambda p: p.id)
        public.sort(key=lambda p: p.created_at, reverse=True)
        return public[:limit]

    def clear(self) -> None:
        """Remove all petitions (for test isolation)."""
        self._petitions.clear()
