"""Base exception classes for the petition signatures domain layer."""


class PetitionServiceError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling and HTTP translation at the
    API boundary.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
        self.message = message
