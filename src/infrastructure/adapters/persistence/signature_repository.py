"""PostgreSQL signature repository.

Storage guarantees:
- Uniqueness: the (petition_id, email_normalized) unique index decides
  duplicates; the insert uses ON CONFLICT DO NOTHING and a missing
  RETURNING row means the constraint fired.
- Atomic confirmation: a conditional UPDATE ... WHERE status = 'unconfirmed'
  and the counter increment run in one transaction. Row locking makes
  concurrent confirms of the same signature serialize; exactly one sees
  the unconfirmed row.
- Scoped listing: signer queries join petitions on author_id so the
  ownership predicate is part of the query. Only name and confirmed_at
  are selected.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from structlog import get_logger

from src.application.ports.signature_repository import (
    ConfirmationOutcome,
    ConfirmationStatus,
)
from src.domain.errors import AlreadySignedError
from src.domain.models.signature import Signature, SignatureStatus
from src.domain.models.signer_view import SignerRecord

logger = get_logger()

_SIGNATURE_COLUMNS = """
    id, petition_id, name, email, email_normalized, comment, ip, user_agent,
    status, confirmed_at, created_at
"""


def _row_to_signature(row: Any) -> Signature:
    return Signature(
        id=row.id,
        petition_id=row.petition_id,
        name=row.name,
        email=row.email,
        email_normalized=row.email_normalized,
        comment=row.comment,
        ip=row.ip,
        user_agent=row.user_agent,
        status=SignatureStatus(row.status),
        confirmed_at=row.confirmed_at,
        created_at=row.created_at,
    )


class PostgresSignatureRepository:
    """PostgreSQL implementation of SignatureRepositoryProtocol."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the repository.

        Args:
            session_factory: SQLAlchemy async session factory.
        """
        self._session_factory = session_factory

    async def get_by_petition_and_email(
        self,
        petition_id: UUID,
        email_normalized: str,
    ) -> Signature | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"""
                    SELECT {_SIGNATURE_COLUMNS}
                    FROM signatures
                    WHERE petition_id = :petition_id
                      AND email_normalized = :email_normalized
                """),
                {"petition_id": petition_id, "email_normalized": email_normalized},
            )
            row = result.fetchone()
        return _row_to_signature(row) if row else None

    async def get(self, signature_id: UUID) -> Signature | None:
        async with self._session_factory() as session:
            result = await session.execute(
                text(f"SELECT {_SIGNATURE_COLUMNS} FROM signatures WHERE id = :id"),
                {"id": signature_id},
            )
            row = result.fetchone()
        return _row_to_signature(row) if row else None

    async def create(self, signature: Signature) -> Signature:
        """Insert an unconfirmed signature.

        Raises:
            AlreadySignedError: A signature for (petition, email) already exists.
        """
        async with self._session_factory() as session, session.begin():
            result = await session.execute(
                text("""
                    INSERT INTO signatures (
                        id, petition_id, name, email, email_normalized,
                        comment, ip, user_agent, status, created_at
                    ) VALUES (
                        :id, :petition_id, :name, :email, :email_normalized,
                        :comment, :ip, :user_agent, :status, :created_at
                    )
                    ON CONFLICT (petition_id, email_normalized) DO NOTHING
                    RETURNING id
                """),
                {
                    "id": signature.id,
                    "petition_id": signature.petition_id,
                    "name": signature.name,
                    "email": signature.email,
                    "email_normalized": signature.email_normalized,
                    "comment": signature.comment,
                    "ip": signature.ip,
                    "user_agent": signature.user_agent,
                    "status": signature.status.value,
                    "created_at": signature.created_at,
                },
            )
            if result.fetchone() is None:
                existing = await session.execute(
                    text("""
                        SELECT id FROM signatures
                        WHERE petition_id = :petition_id
                          AND email_normalized = :email_normalized
                    """),
                    {
                        "petition_id": signature.petition_id,
                        "email_normalized": signature.email_normalized,
                    },
                )
                raise AlreadySignedError(
                    petition_id=signature.petition_id,
                    existing_signature_id=existing.scalar(),
                )
        return signature

    async def confirm(
        self,
        signature_id: UUID,
        confirmed_at: datetime,
    ) -> ConfirmationOutcome:
        """Confirm a signature and increment its petition's counter atomically."""
        log = logger.bind(signature_id=str(signature_id))

        async with self._session_factory() as session, session.begin():
            transitioned = await session.execute(
                text("""
                    UPDATE signatures
                    SET status = 'confirmed', confirmed_at = :confirmed_at
                    WHERE id = :id AND status = 'unconfirmed'
                    RETURNING petition_id
                """),
                {"id": signature_id, "confirmed_at": confirmed_at},
            )
            petition_id = transitioned.scalar()

            if petition_id is None:
                existing = await session.execute(
                    text("SELECT petition_id FROM signatures WHERE id = :id"),
                    {"id": signature_id},
                )
                existing_petition_id = existing.scalar()
                if existing_petition_id is None:
                    return ConfirmationOutcome(
                        status=ConfirmationStatus.NOT_FOUND,
                        signature_id=signature_id,
                    )
                return ConfirmationOutcome(
                    status=ConfirmationStatus.ALREADY_CONFIRMED,
                    signature_id=signature_id,
                    petition_id=existing_petition_id,
                )

            counted = await session.execute(
                text("""
                    UPDATE petitions
                    SET signature_count = signature_count + 1
                    WHERE id = :petition_id
                    RETURNING signature_count
                """),
                {"petition_id": petition_id},
            )
            signature_count = counted.scalar()

        log.debug("signature_confirm_committed", signature_count=signature_count)
        return ConfirmationOutcome(
            status=ConfirmationStatus.CONFIRMED,
            signature_id=signature_id,
            petition_id=petition_id,
            signature_count=signature_count,
        )

    async def list_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
        limit: int,
        offset: int,
    ) -> list[SignerRecord]:
        async with self._session_factory() as session:
            result = await session.execute(
                text("""
                    SELECT s.name, s.confirmed_at
                    FROM signatures s
                    JOIN petitions p ON p.id = s.petition_id
                    WHERE s.petition_id = :petition_id
                      AND p.author_id = :caller_id
                      AND s.status = 'confirmed'
                    ORDER BY s.confirmed_at ASC, s.id ASC
                    LIMIT :limit OFFSET :offset
                """),
                {
                    "petition_id": petition_id,
                    "caller_id": caller_id,
                    "limit": limit,
                    "offset": offset,
                },
            )
            rows = result.fetchall()
        return [SignerRecord(name=row.name, confirmed_at=row.confirmed_at) for row in rows]

    async def count_confirmed_signers(
        self,
        petition_id: UUID,
        caller_id: UUID,
    ) -> int:
        async with self._session_factory() as session:
            result = await session.execute(
                text("""
                    SELECT COUNT(*)
                    FROM signatures s
                    JOIN petitions p ON p.id = s.petition_id
                    WHERE s.petition_id = :petition_id
                      AND p.author_id = :caller_id
                      AND s.status = 'confirmed'
                """),
                {"petition_id": petition_id, "caller_id": caller_id},
            )
            return result.scalar() or 0
