"""Public petition catalogue.

Read-only views of public petitions for the petitions index and the
petition page. Drafts and closed or archived petitions are never shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from src.domain.errors import PetitionNotFoundError

if TYPE_CHECKING:
    from src.application.ports.petition_repository import PetitionRepositoryProtocol
    from src.domain.models.petition import Petition

logger = get_logger(__name__)

DEFAULT_CATALOG_SIZE = 50


class PetitionCatalogService:
    """Lists and looks up public petitions."""

    def __init__(
        self,
        petition_repo: PetitionRepositoryProtocol,
        catalog_size: int = DEFAULT_CATALOG_SIZE,
    ) -> None:
        self._petition_repo = petition_repo
        self._catalog_size = catalog_size

    async def list_public(self) -> list[Petition]:
        """Return the newest public petitions."""
        return await self._petition_repo.list_public(limit=self._catalog_size)

    async def get_by_slug(self, slug: str) -> Petition:
        """Return a public petition by slug.

        Raises:
            PetitionNotFoundError: No public petition has this slug.
        """
        petition = await self._petition_repo.get_public_by_slug(slug)
        if petition is None:
            logger.info("petition_page_not_found", slug=slug)
            raise PetitionNotFoundError(slug)
        return petition
