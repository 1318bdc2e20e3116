"""Identity provider adapters."""

from src.infrastructure.adapters.auth.http_credential_verifier import (
    CredentialVerificationUnavailableError,
    HttpCredentialVerifier,
)

__all__: list[str] = ["CredentialVerificationUnavailableError", "HttpCredentialVerifier"]
