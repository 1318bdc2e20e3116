"""Confirmation token payload value object.

A confirmation token is a signed, self-contained capability naming one
signature. It is never stored: single use is enforced by the status of the
signature it references.

Wire payload (before signing):
    {"exp": <expiry, ms since epoch>, "petitionId": "<uuid>", "signatureId": "<uuid>"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class MalformedTokenPayloadError(ValueError):
    """Raised when a decoded payload does not have the expected shape."""


@dataclass(frozen=True)
class ConfirmationTokenPayload:
    """Claims carried by a confirmation token.

    Attributes:
        signature_id: Signature the token confirms.
        petition_id: Petition the signature belongs to.
        expires_at_ms: Absolute expiry, milliseconds since the Unix epoch.
    """

    signature_id: UUID
    petition_id: UUID
    expires_at_ms: int

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.expires_at_ms / 1000, tz=timezone.utc)

    def is_expired(self, now: datetime) -> bool:
        """A token is expired once ``now`` is strictly past its expiry."""
        return to_epoch_ms(now) > self.expires_at_ms

    def to_dict(self) -> dict[str, Any]:
        return {
            "signatureId": str(self.signature_id),
            "petitionId": str(self.petition_id),
            "exp": self.expires_at_ms,
        }

    def canonical_bytes(self) -> bytes:
        """Canonical serialization the MAC is computed over."""
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> ConfirmationTokenPayload:
        """Parse a decoded payload.

        Raises:
            MalformedTokenPayloadError: If keys are missing or mistyped.
        """
        if not isinstance(data, dict):
            raise MalformedTokenPayloadError("payload is not an object")
        expires_at_ms = data.get("exp")
        if isinstance(expires_at_ms, bool) or not isinstance(expires_at_ms, int):
            raise MalformedTokenPayloadError("exp is not an integer")
        try:
            return cls(
                signature_id=UUID(str(data["signatureId"])),
                petition_id=UUID(str(data["petitionId"])),
                expires_at_ms=expires_at_ms,
            )
        except (KeyError, ValueError) as e:
            raise MalformedTokenPayloadError(f"invalid payload: {e}") from e


def canonical_json(data: dict[str, Any]) -> bytes:
    """Deterministic compact JSON encoding with sorted keys."""
    return json.dumps(data, sort_keys=True, separators=(",", ":")).encode("utf-8")


def to_epoch_ms(moment: datetime) -> int:
    """Convert an aware datetime to integer milliseconds since the epoch."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)
