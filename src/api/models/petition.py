"""Public petition catalogue response models."""

from uuid import UUID

from pydantic import BaseModel, Field

from src.api.models.signer import DateTimeWithZ


class PetitionSummaryResponse(BaseModel):
    """Public projection of a petition.

    Author identity and moderation status are not part of it.
    """

    id: UUID
    slug: str
    title: str
    summary: str
    goal: int
    signature_count: int = Field(ge=0)
    progress_percent: float = Field(ge=0, le=100)
    created_at: DateTimeWithZ


class PetitionListResponse(BaseModel):
    """Newest public petitions."""

    petitions: list[PetitionSummaryResponse] = Field(default_factory=list)
