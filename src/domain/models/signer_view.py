"""Redacted signer projection shown to petition authors.

Authors see exactly three facts about each confirmed signer: the first
token of their name, a verified flag and when they confirmed. Email, full
name, ip and user agent never reach this model.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def extract_first_name(name: str) -> str:
    """Return the first whitespace-delimited token of a name.

    Splitting follows ``str.split()`` so any Unicode whitespace separates
    tokens. Blank names yield an empty string.

    Example:
        >>> extract_first_name("  John Smith ")
        'John'
        >>> extract_first_name("राज कुमार")
        'राज'
    """
    tokens = name.split()
    return tokens[0] if tokens else ""


@dataclass(frozen=True)
class SignerRecord:
    """Minimal row read from storage for the signer listing.

    Repositories select only these columns so other signer data never
    crosses the data-access boundary.
    """

    name: str
    confirmed_at: datetime


@dataclass(frozen=True)
class SignerView:
    """Redacted view of one confirmed signer.

    Attributes:
        first_name: First token of the signer's name.
        verified: Always True for confirmed signers; kept for partial-trust
            states that may be listed later.
        confirmed_at: When the signature was confirmed (UTC).
    """

    first_name: str
    verified: bool
    confirmed_at: datetime

    @classmethod
    def from_record(cls, record: SignerRecord) -> SignerView:
        return cls(
            first_name=extract_first_name(record.name),
            verified=True,
            confirmed_at=record.confirmed_at,
        )
