"""HTTP credential verifier.

Asks the identity provider who a bearer credential belongs to:
``GET {auth_api_url}/user`` with the caller's credential as the bearer and
the service key as ``apikey``. A 2xx response carrying an ``id`` yields the
caller identity; 401/403, or a body without a usable id, means the
credential is not valid. Other statuses and transport errors are raised.
"""

from __future__ import annotations

from uuid import UUID

import httpx
from structlog import get_logger

from src.application.ports.credential_verifier import CallerIdentity

log = get_logger()

DEFAULT_TIMEOUT_SECONDS = 5.0
REJECTED_STATUSES = frozenset({400, 401, 403, 404})


class CredentialVerificationUnavailableError(Exception):
    """The identity provider could not answer."""


class HttpCredentialVerifier:
    """Verifies bearer credentials against an HTTP identity provider."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._user_url = f"{api_url.rstrip('/')}/user"
        self._api_key = api_key
        self._timeout = timeout
        self._client = client

    async def _get(self, headers: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(self._user_url, headers=headers, timeout=self._timeout)
        async with httpx.AsyncClient() as client:
            return await client.get(self._user_url, headers=headers, timeout=self._timeout)

    async def verify(self, credential: str) -> CallerIdentity | None:
        """Resolve a credential to a caller identity.

        Returns:
            CallerIdentity, or None if the provider rejects the credential.

        Raises:
            CredentialVerificationUnavailableError: Transport failure or
                unexpected status.
        """
        headers = {"Authorization": f"Bearer {credential}"}
        if self._api_key:
            headers["apikey"] = self._api_key

        try:
            response = await self._get(headers)
        except httpx.HTTPError as e:
            raise CredentialVerificationUnavailableError(type(e).__name__) from e

        if response.status_code in REJECTED_STATUSES:
            return None
        if response.status_code >= 300:
            raise CredentialVerificationUnavailableError(
                f"Identity provider returned {response.status_code}"
            )

        try:
            body = response.json()
            return CallerIdentity(user_id=UUID(str(body["id"])))
        except (ValueError, KeyError, TypeError):
            log.warning("credential_verifier_unusable_identity")
            return None
