"""Signature domain errors.

This module provides the exception taxonomy for signing, confirming and
listing signatures. Every error knows how to render itself as an RFC 7807
problem document; the ``error`` member carries the caller-facing message.

Caller-facing messages never echo internal detail (emails, stack traces,
token contents). Invalid, expired and already-used confirmation links
differ only in message text so the link endpoint does not become an oracle.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from src.domain.exceptions import PetitionServiceError

PROBLEM_TYPE_PREFIX = "urn:petitions"


class SignatureServiceError(PetitionServiceError):
    """Base error for signature operations.

    Subclasses set ``problem_type``, ``title`` and ``status_code`` and pass the
    caller-facing message to the constructor.
    """

    problem_type: str = f"{PROBLEM_TYPE_PREFIX}:error"
    title: str = "Error"
    status_code: int = 500

    def to_rfc7807_dict(self, instance: str | None = None) -> dict[str, Any]:
        """Serialize to RFC 7807 problem details.

        Args:
            instance: Request URL the problem occurred on, if known.

        Returns:
            Dictionary with RFC 7807 members plus ``error``.
        """
        result: dict[str, Any] = {
            "type": self.problem_type,
            "title": self.title,
            "status": self.status_code,
            "detail": self.message,
            "error": self.message,
        }
        if instance is not None:
            result["instance"] = instance
        return result


class SignatureValidationError(SignatureServiceError):
    """Raised when a request fails input validation.

    HTTP Status: 400 Bad Request

    Attributes:
        details: Field-level problems, each with ``field`` and ``message``.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:validation-failed"
    title = "Invalid Request"
    status_code = 400

    def __init__(
        self,
        details: list[dict[str, str]] | None = None,
        message: str = "Invalid request data",
    ) -> None:
        self.details = details or []
        super().__init__(message)

    def to_rfc7807_dict(self, instance: str | None = None) -> dict[str, Any]:
        result = super().to_rfc7807_dict(instance)
        result["details"] = self.details
        return result


class PetitionNotFoundError(SignatureServiceError):
    """Raised when a petition is missing or not open for signing.

    A draft or closed petition is reported exactly like a missing one.

    HTTP Status: 404 Not Found

    Attributes:
        petition_id: The petition that was requested.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:petition-not-found"
    title = "Petition Not Found"
    status_code = 404

    def __init__(self, petition_id: UUID | str) -> None:
        self.petition_id = petition_id
        super().__init__("Petition not found or unavailable")


class AlreadySignedError(SignatureServiceError):
    """Raised when an email has already signed a petition.

    Raised both by the pre-insert duplicate check and by repositories when
    the storage uniqueness constraint on (petition_id, email_normalized)
    rejects an insert that lost the race.

    HTTP Status: 409 Conflict

    Attributes:
        petition_id: The petition that was already signed.
        existing_signature_id: The existing signature, when known.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:already-signed"
    title = "Already Signed"
    status_code = 409

    def __init__(
        self,
        petition_id: UUID,
        existing_signature_id: UUID | None = None,
    ) -> None:
        self.petition_id = petition_id
        self.existing_signature_id = existing_signature_id
        super().__init__("You have already signed this petition")


class UnauthorizedError(SignatureServiceError):
    """Raised when a caller has no valid credential.

    Missing and rejected credentials produce the same error.

    HTTP Status: 401 Unauthorized
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:unauthorized"
    title = "Unauthorized"
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class InvalidConfirmationTokenError(SignatureServiceError):
    """Raised when a confirmation token is missing, malformed, tampered or expired.

    HTTP Status: 400 Bad Request
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:invalid-confirmation-token"
    title = "Invalid Confirmation Link"
    status_code = 400

    def __init__(self, message: str = "Invalid or expired confirmation link") -> None:
        super().__init__(message)


class SignatureAlreadyConfirmedError(SignatureServiceError):
    """Raised when a confirmation link is redeemed a second time.

    This is the expected outcome of a duplicate or racing redemption, not a
    fault. The petition counter is untouched.

    HTTP Status: 400 Bad Request

    Attributes:
        signature_id: The signature that was already confirmed.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:already-confirmed"
    title = "Already Confirmed"
    status_code = 400

    def __init__(self, signature_id: UUID) -> None:
        self.signature_id = signature_id
        super().__init__("This confirmation link has already been used or is invalid")


class SignatureNotFoundError(SignatureServiceError):
    """Raised when a confirmation token references a signature that does not exist.

    Reported on the confirmation link like an already-used link.

    HTTP Status: 400 Bad Request

    Attributes:
        signature_id: The signature id carried by the token.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:signature-not-found"
    title = "Signature Not Found"
    status_code = 400

    def __init__(self, signature_id: UUID) -> None:
        self.signature_id = signature_id
        super().__init__("This confirmation link has already been used or is invalid")


class InternalServiceError(SignatureServiceError):
    """Raised when a store or transport call fails unexpectedly.

    The original exception is chained; callers only see a generic message.

    HTTP Status: 500 Internal Server Error

    Attributes:
        operation: Short name of the failed operation, for logs.
    """

    problem_type = f"{PROBLEM_TYPE_PREFIX}:internal-error"
    title = "Internal Server Error"
    status_code = 500

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("Internal server error")
