"""Domain errors for petition signatures.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from PetitionServiceError.
"""

from src.domain.errors.signature import (
    AlreadySignedError,
    InternalServiceError,
    InvalidConfirmationTokenError,
    PetitionNotFoundError,
    SignatureAlreadyConfirmedError,
    SignatureNotFoundError,
    SignatureServiceError,
    SignatureValidationError,
    UnauthorizedError,
)

__all__: list[str] = [
    "AlreadySignedError",
    "InternalServiceError",
    "InvalidConfirmationTokenError",
    "PetitionNotFoundError",
    "SignatureAlreadyConfirmedError",
    "SignatureNotFoundError",
    "SignatureServiceError",
    "SignatureValidationError",
    "UnauthorizedError",
]
