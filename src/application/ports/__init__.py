"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- PetitionRepositoryProtocol: read access to petitions
- SignatureRepositoryProtocol: signature persistence and the atomic confirmation
- ConfirmationTokenCodecProtocol: issue/verify confirmation tokens
- ConfirmationEmailDispatcherProtocol: confirmation email delivery
- CredentialVerifierProtocol: bearer credential verification
- TimeAuthorityProtocol: current time
"""

from src.application.ports.confirmation_token import ConfirmationTokenCodecProtocol
from src.application.ports.credential_verifier import (
    CallerIdentity,
    CredentialVerifierProtocol,
)
from src.application.ports.email_dispatcher import (
    ConfirmationEmailDispatcherProtocol,
    EmailDispatchError,
)
from src.application.ports.petition_repository import PetitionRepositoryProtocol
from src.application.ports.signature_repository import (
    ConfirmationOutcome,
    ConfirmationStatus,
    SignatureRepositoryProtocol,
)
from src.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "CallerIdentity",
    "ConfirmationEmailDispatcherProtocol",
    "ConfirmationOutcome",
    "ConfirmationStatus",
    "ConfirmationTokenCodecProtocol",
    "CredentialVerifierProtocol",
    "EmailDispatchError",
    "PetitionRepositoryProtocol",
    "SignatureRepositoryProtocol",
    "TimeAuthorityProtocol",
]
