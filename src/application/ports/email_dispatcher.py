"""Confirmation email dispatch protocol.

Delivery is an external collaborator. Callers treat failures as
non-fatal: the signature already exists and can be re-sent later.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class EmailDispatchError(Exception):
    """Raised by dispatchers when a message could not be handed off."""


class ConfirmationEmailDispatcherProtocol(Protocol):
    """Sends signature confirmation emails."""

    @abstractmethod
    async def send(self, email: str, petition_title: str, token: str) -> None:
        """Send a confirmation email carrying the token.

        Args:
            email: Recipient address as entered by the signer.
            petition_title: Title of the signed petition.
            token: Confirmation token to embed in the link.

        Raises:
            EmailDispatchError: The message could not be handed off.
        """
        ...
