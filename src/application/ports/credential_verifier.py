"""Bearer credential verification protocol.

Verification itself is delegated to an identity provider. The core only
needs a stable caller identity, or nothing.
"""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller.

    Attributes:
        user_id: Stable identity, compared against Petition.author_id.
    """

    user_id: UUID


class CredentialVerifierProtocol(Protocol):
    """Turns a bearer credential into a caller identity."""

    @abstractmethod
    async def verify(self, credential: str) -> CallerIdentity | None:
        """Verify a bearer credential.

        Returns:
            The caller identity, or None if the credential is not valid.
            Implementations must not distinguish why it is not valid.
        """
        ...
