"""Confirmation token codec protocol.

Two pure operations over (token, secret, current time). No I/O and no
shared mutable state, so the codec can be tested in isolation from storage
and transport.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import timedelta
from typing import Protocol
from uuid import UUID

from src.domain.models.confirmation_token import ConfirmationTokenPayload


class ConfirmationTokenCodecProtocol(Protocol):
    """Issues and verifies signature confirmation tokens."""

    @abstractmethod
    def issue(
        self,
        signature_id: UUID,
        petition_id: UUID,
        *,
        ttl: timedelta | None = None,
    ) -> str:
        """Mint a URL-safe token bound to a signature.

        Args:
            signature_id: Signature to confirm.
            petition_id: Petition the signature belongs to.
            ttl: Lifetime override; defaults to the configured lifetime.

        Returns:
            Opaque URL-safe token string.
        """
        ...

    @abstractmethod
    def verify(self, token: str) -> ConfirmationTokenPayload | None:
        """Verify a token.

        Never raises. Malformed, tampered and expired tokens all return None.

        Returns:
            The payload if the token is authentic and unexpired, else None.
        """
        ...
