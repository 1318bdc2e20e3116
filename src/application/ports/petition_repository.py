"""Petition repository protocol.

Petitions are created and moderated elsewhere; this core only reads them.
The signature_count column is written exclusively by the signature
repository's confirmation transaction.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol
from uuid import UUID

from src.domain.models.petition import Petition


class PetitionRepositoryProtocol(Protocol):
    """Read access to petitions."""

    @abstractmethod
    async def get(self, petition_id: UUID) -> Petition | None:
        """Get a petition by id, in any status.

        Args:
            petition_id: The petition to load.

        Returns:
            The petition, or None if it does not exist.
        """
        ...

    @abstractmethod
    async def get_public_by_slug(self, slug: str) -> Petition | None:
        """Get a public petition by slug.

        Returns:
            The petition if it exists and is public, else None.
        """
        ...

    @abstractmethod
    async def list_public(self, limit: int) -> list[Petition]:
        """List public petitions, newest first.

        Args:
            limit: Maximum number of petitions to return.
        """
        ...
