"""HTTP confirmation email dispatcher.

Hands confirmation emails to a transactional email API with a JSON POST
(``from``, ``to``, ``subject``, ``text``, ``html``) authenticated by a
bearer API key. The confirmation link is
``{public_base_url}/confirm?token=<token>``.
"""

from __future__ import annotations

from html import escape
from urllib.parse import urlencode

import httpx
from structlog import get_logger

from src.application.ports.email_dispatcher import EmailDispatchError
from src.domain.models.signature import mask_email

log = get_logger()

DEFAULT_TIMEOUT_SECONDS = 10.0


def build_confirmation_link(public_base_url: str, token: str) -> str:
    """Build the link a signer clicks to confirm.

    Example:
        >>> build_confirmation_link("https://example.org/", "abc")
        'https://example.org/confirm?token=abc'
    """
    return f"{public_base_url.rstrip('/')}/confirm?{urlencode({'token': token})}"


class HttpConfirmationEmailDispatcher:
    """Sends confirmation emails through an HTTP email API."""

    def __init__(
        self,
        api_url: str,
        api_key: str | None,
        sender: str,
        public_base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_url: Endpoint accepting the send request.
            api_key: Bearer key for the email API, if it requires one.
            sender: From address.
            public_base_url: Base URL of the public site, for the link.
            timeout: Request timeout in seconds.
            client: Optional shared client (tests inject a MockTransport).
        """
        self._api_url = api_url
        self._api_key = api_key
        self._sender = sender
        self._public_base_url = public_base_url
        self._timeout = timeout
        self._client = client

    def _build_message(self, email: str, petition_title: str, token: str) -> dict[str, str]:
        link = build_confirmation_link(self._public_base_url, token)
        subject = f"Confirm your signature: {petition_title}"
        text = (
            f"Thank you for signing \"{petition_title}\".\n\n"
            f"Please confirm your signature by opening this link:\n{link}\n\n"
            "If you did not sign this petition, you can ignore this email."
        )
        html = (
            f"<p>Thank you for signing <strong>{escape(petition_title)}</strong>.</p>"
            f'<p><a href="{escape(link)}">Confirm your signature</a></p>'
            "<p>If you did not sign this petition, you can ignore this email.</p>"
        )
        return {
            "from": self._sender,
            "to": email,
            "subject": subject,
            "text": text,
            "html": html,
        }

    async def send(self, email: str, petition_title: str, token: str) -> None:
        """Send the confirmation email.

        Raises:
            EmailDispatchError: Transport failure or non-2xx response.
        """
        headers = {}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        message = self._build_message(email, petition_title, token)

        try:
            if self._client is not None:
                response = await self._client.post(
                    self._api_url, json=message, headers=headers, timeout=self._timeout
                )
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.post(
                        self._api_url, json=message, headers=headers, timeout=self._timeout
                    )
        except httpx.HTTPError as e:
            raise EmailDispatchError(f"Email API unreachable: {type(e).__name__}") from e

        if response.status_code >= 300:
            raise EmailDispatchError(f"Email API returned {response.status_code}")

        log.info("confirmation_email_sent", email=mask_email(email))
