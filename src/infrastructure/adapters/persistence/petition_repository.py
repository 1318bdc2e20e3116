"""PostgreSQL petition repository.

Read-only access to the petitions table. signature_count is maintained by
PostgresSignatureRepository.confirm and only read here.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from src.domain.models.petition import Petition, PetitionStatus

logger = get_logger()

_PETITION_COLUMNS = """
    id, slug, title, summary, goal, author_id, status, signature_count, created_at
"""


def _row_to_petition(row: Any) -> Petition:
    return Petition(
        id=row.id,
        slug=row.slug,
        title=row.title,
        summary=row.summary,
        goal=row.goal,
        author_id=row.author_id,
        status=PetitionStatus(row.status),
        signature_count=row.signature_count,
        created_at=row.created_at,
    )


class PostgresPetitionRepository:
    """PostgreSQL implementation of PetitionRepositoryProtocol.

    Attributes:
        _session_factory: SQLAlchemy async session factory for DB access.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, petition_id: UUID) -> Petition | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"SELECT {_PETITION_COLUMNS} FROM petitions WHERE id = :id"),
                {"id": petition_id},
            )
            row = result.fetchone()
        return _row_to_petition(row) if row else None

    async def get_public_by_slug(self, slug: str) -> Petition | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"""
                    SELECT {_PETITION_COLUMNS}
                    FROM petitions
                    WHERE slug = :slug AND status = 'public'
                """),
                {"slug": slug},
            )
            row = result.fetchone()
        return _row_to_petition(row) if row else None

    async def list_public(self, limit: int) -> list[Petition]:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"""
                    SELECT {_PETITION_COLUMNS}
                    FROM petitions
                    WHERE status = 'public'
                    ORDER BY created_at DESC, id
                    LIMIT :limit
                """),
                {"limit": limit},
            )
            rows = result.fetchall()
        return [_row_to_petition(row) for row in rows]
