"""Signature domain model.

A signature starts ``unconfirmed`` when it is submitted and becomes
``confirmed`` exactly once, when its confirmation link is redeemed.

Invariants:
- (petition_id, email_normalized) is unique regardless of status
- confirmed_at is set if and only if status is CONFIRMED
- ip and user_agent are audit data and never leave the service
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 200
COMMENT_MAX_LENGTH = 1000
EMAIL_MAX_LENGTH = 254

# local@domain.tld with no whitespace and a dotted domain
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class SignatureStatus(Enum):
    """Confirmation status of a signature."""

    UNCONFIRMED = "unconfirmed"
    CONFIRMED = "confirmed"


def is_valid_email(email: str) -> bool:
    """Check an address against the accepted shape and length."""
    return len(email) <= EMAIL_MAX_LENGTH and EMAIL_PATTERN.fullmatch(email) is not None


def normalize_email(email: str) -> str:
    """Return the canonical form of an email address used for uniqueness.

    Surrounding whitespace is stripped and the whole address (local part and
    domain) is lowercased.

    Args:
        email: Address as typed by the signer.

    Returns:
        Normalized address.
    """
    return email.strip().lower()


def mask_email(email: str) -> str:
    """Mask an email address for log output.

    Keeps the first character of the local part and the domain:
    ``jane.doe@example.org`` becomes ``j***@example.org``.
    """
    local, sep, domain = email.partition("@")
    if not sep:
        return "***"
    return f"{local[:1]}***@{domain}"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class Signature:
    """One person's pledge to a petition.

    Attributes:
        id: Unique identifier.
        petition_id: Petition being signed.
        name: Display name as entered (2-200 characters).
        email: Address as entered.
        email_normalized: Canonical address, unique per petition.
        comment: Optional comment (at most 1000 characters).
        ip: Client address at submission, for audit.
        user_agent: Client user agent at submission, for audit.
        status: Confirmation status.
        confirmed_at: When the signature was confirmed (UTC), else None.
        created_at: Submission timestamp (UTC).
    """

    id: UUID
    petition_id: UUID
    name: str
    email: str
    email_normalized: str
    comment: str | None = field(default=None)
    ip: str | None = field(default=None)
    user_agent: str | None = field(default=None)
    status: SignatureStatus = field(default=SignatureStatus.UNCONFIRMED)
    confirmed_at: datetime | None = field(default=None)
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate signature fields."""
        if (self.status is SignatureStatus.CONFIRMED) != (self.confirmed_at is not None):
            raise ValueError("confirmed_at must be set exactly when status is confirmed")
        if self.comment is not None and len(self.comment) > COMMENT_MAX_LENGTH:
            raise ValueError(
                f"Comment exceeds maximum length of {COMMENT_MAX_LENGTH} characters"
            )

    @property
    def is_confirmed(self) -> bool:
        return self.status is SignatureStatus.CONFIRMED

    def confirm(self, confirmed_at: datetime) -> Signature:
        """Return the confirmed form of this signature.

        Args:
            confirmed_at: Confirmation timestamp (UTC).

        Returns:
            New Signature with status CONFIRMED.

        Raises:
            ValueError: If the signature is already confirmed.
        """
        if self.is_confirmed:
            raise ValueError(f"Signature {self.id} is already confirmed")
        return Signature(
            id=self.id,
            petition_id=self.petition_id,
            name=self.name,
            email=self.email,
            email_normalized=self.email_normalized,
            comment=self.comment,
            ip=self.ip,
            user_agent=self.user_agent,
            status=SignatureStatus.CONFIRMED,
            confirmed_at=confirmed_at,
            created_at=self.created_at,
        )
