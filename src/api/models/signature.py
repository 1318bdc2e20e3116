"""Signature API request/response models.

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic handles schema validation
2. FAIL LOUD - Invalid requests return 400 with per-field details
3. WIRE NAMES - The submission body uses ``petitionId`` on the wire
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.models.signature import (
    COMMENT_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    is_valid_email,
)


class SubmitSignatureRequest(BaseModel):
    """Request to sign a petition.

    Attributes:
        petition_id: Petition being signed (``petitionId`` on the wire).
        name: Display name, 2-200 characters after trimming.
        email: Signer's email address.
        comment: Optional comment, at most 1000 characters.
    """

    model_config = ConfigDict(populate_by_name=True)

    petition_id: UUID = Field(
        ...,
        alias="petitionId",
        description="UUID of the petition to sign",
    )
    name: str = Field(
        ...,
        description="Signer display name",
    )
    email: str = Field(
        ...,
        max_length=EMAIL_MAX_LENGTH,
        description="Signer email address; a confirmation link is sent here",
    )
    comment: str | None = Field(
        default=None,
        max_length=COMMENT_MAX_LENGTH,
        description="Optional comment",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        stripped = v.strip()
        if len(stripped) < NAME_MIN_LENGTH:
            raise ValueError(f"Name must be at least {NAME_MIN_LENGTH} characters")
        if len(stripped) > NAME_MAX_LENGTH:
            raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters")
        return stripped

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        stripped = v.strip()
        if not is_valid_email(stripped):
            raise ValueError("Invalid email address")
        return stripped


class SubmitSignatureResponse(BaseModel):
    """Acknowledgment of an accepted (still unconfirmed) signature."""

    success: bool = Field(default=True)
    message: str = Field(description="Next step for the signer")
