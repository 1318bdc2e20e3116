"""In-memory stub for CredentialVerifierProtocol.

Maps opaque credential strings to user ids. Unknown credentials verify to
None, like an identity provider rejecting a bad or expired token.
"""

from __future__ import annotations

from uuid import UUID

from src.application.ports.credential_verifier import CallerIdentity


class CredentialVerifierStub:
    """Stub credential verifier backed by a dict."""

    def __init__(self, credentials: dict[str, UUID] | None = None) -> None:
        self._credentials: dict[str, UUID] = dict(credentials or {})

    def register(self, credential: str, user_id: UUID) -> None:
        """Accept ``credential`` as identifying ``user_id``."""
        self._credentials[credential] = user_id

    async def verify(self, credential: str) -> CallerIdentity | None:
        user_id = self._credentials.get(credential)
        if user_id is None:
            return None
        return CallerIdentity(user_id=user_id)
