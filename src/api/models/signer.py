"""Signer listing response models.

Exactly three fields per signer. Nothing else about a signer is part of
the response schema, so nothing else can be serialized.
"""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

# ISO 8601 with Z suffix (Pydantic v2)
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class SignerResponse(BaseModel):
    """One redacted confirmed signer.

    Attributes:
        first_name: First whitespace-delimited token of the signer's name.
        verified: Whether the signer confirmed their email.
        confirmed_at: When the signature was confirmed (UTC).
    """

    first_name: str
    verified: bool
    confirmed_at: DateTimeWithZ


class SignerListResponse(BaseModel):
    """A page of redacted signers.

    Attributes:
        signers: Signers on this page.
        total: Confirmed signers visible to the caller, independent of paging.
        limit: Effective page size.
        offset: Effective offset.
    """

    signers: list[SignerResponse] = Field(default_factory=list)
    total: int = Field(ge=0)
    limit: int = Field(ge=1)
    offset: int = Field(ge=0)
