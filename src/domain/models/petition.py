"""Petition domain model.

A petition is published by an author and collects email-confirmed
signatures. ``signature_count`` is a denormalized counter of confirmed
signatures; it is only ever moved by the confirmation transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class PetitionStatus(Enum):
    """Publication status of a petition.

    States:
        DRAFT: Being written, not visible or signable
        PUBLIC: Published and open for signatures
        CLOSED: Published but no longer accepting signatures
        ARCHIVED: Hidden from the public catalogue
    """

    DRAFT = "draft"
    PUBLIC = "public"
    CLOSED = "closed"
    ARCHIVED = "archived"

    def accepts_signatures(self) -> bool:
        """Only public petitions can be signed."""
        return self is PetitionStatus.PUBLIC


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class Petition:
    """A published request for signatures.

    Attributes:
        id: Unique identifier.
        slug: URL-safe handle used by the petition page.
        title: Headline shown to signers and in confirmation emails.
        summary: Body text of the petition.
        goal: Target number of confirmed signatures.
        author_id: Identity of the author who owns the petition.
        status: Publication status.
        signature_count: Number of confirmed signatures (denormalized).
        created_at: Creation timestamp (UTC).
    """

    id: UUID
    slug: str
    title: str
    summary: str
    goal: int
    author_id: UUID
    status: PetitionStatus = field(default=PetitionStatus.DRAFT)
    signature_count: int = field(default=0)
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate petition fields."""
        if self.signature_count < 0:
            raise ValueError("signature_count cannot be negative")
        if not self.slug:
            raise ValueError("slug is required")

    @property
    def progress_percent(self) -> float:
        """Progress towards the goal, capped at 100."""
        if self.goal <= 0:
            return 0.0
        return min(self.signature_count / self.goal * 100, 100.0)

    def with_signature_count(self, signature_count: int) -> Petition:
        """Return a copy with a different signature count.

        Since Petition is frozen, returns new instance.
        """
        return Petition(
            id=self.id,
            slug=self.slug,
            title=self.title,
            summary=self.summary,
            goal=self.goal,
            author_id=self.author_id,
            status=self.status,
            signature_count=signature_count,
            created_at=self.created_at,
        )
