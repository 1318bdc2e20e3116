"""Infrastructure stubs for development and testing.

Available stubs:
- PetitionRepositoryStub: In-memory petitions table
- SignatureRepositoryStub: In-memory signatures with uniqueness, atomic
  confirm and ownership-scoped listing
- ConfirmationEmailDispatcherStub: Captures confirmation emails
- CredentialVerifierStub: Maps credentials to user ids

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.credential_verifier_stub import CredentialVerifierStub
from src.infrastructure.stubs.email_dispatcher_stub import (
    ConfirmationEmailDispatcherStub,
    SentConfirmationEmail,
)
from src.infrastructure.stubs.petition_repository_stub import PetitionRepositoryStub
from src.infrastructure.stubs.signature_repository_stub import SignatureRepositoryStub

__all__: list[str] = [
    "ConfirmationEmailDispatcherStub",
    "CredentialVerifierStub",
    "PetitionRepositoryStub",
    "SentConfirmationEmail",
    "SignatureRepositoryStub",
]
