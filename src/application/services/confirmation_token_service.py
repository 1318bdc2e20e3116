"""Confirmation token codec.

Stateless signing and verification of signature confirmation tokens.

Token Format:
    base64url(canonical_json({"d": payload, "s": hex_hmac_sha256(canonical_json(payload))}))

    - base64url per RFC 4648 Section 5, padding stripped
    - canonical_json: sorted keys, compact separators
    - payload: {"exp": ms_since_epoch, "petitionId": uuid, "signatureId": uuid}

Developer Golden Rules:
1. Tokens are OPAQUE to clients - only the server can mint or parse them
2. verify() NEVER raises - every failure is a single None outcome
3. The reason for a rejection is logged, never returned
4. Never log the token itself
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
from datetime import timedelta
from typing import Any
from uuid import UUID

from structlog import get_logger

from src.application.ports.confirmation_token import ConfirmationTokenCodecProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.domain.models.confirmation_token import (
    ConfirmationTokenPayload,
    MalformedTokenPayloadError,
    canonical_json,
    to_epoch_ms,
)

logger = get_logger(__name__)

DEFAULT_TOKEN_TTL = timedelta(hours=24)


class _TokenRejected(Exception):
    """Internal signal carrying the rejection reason for logging."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def _b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64url_decode(token: str) -> bytes:
    """Decode unpadded base64url, rejecting non-canonical encodings."""
    try:
        raw = base64.urlsafe_b64decode(token + "=" * (-len(token) % 4))
    except (binascii.Error, ValueError) as e:
        raise _TokenRejected("malformed") from e
    # Lenient decoding ignores stray characters and trailing bits, so two
    # different strings could otherwise decode to the same token.
    if _b64url_encode(raw) != token:
        raise _TokenRejected("malformed")
    return raw


class ConfirmationTokenCodec(ConfirmationTokenCodecProtocol):
    """HMAC-SHA256 confirmation token codec.

    Verification is a pure function of (token, secret, current time). The
    secret is the only security boundary: anyone holding it can forge
    confirmations for any signature.

    Example:
        >>> codec = ConfirmationTokenCodec(secret="s3cret", time_authority=clock)
        >>> token = codec.issue(signature_id, petition_id)
        >>> codec.verify(token).signature_id == signature_id
        True
    """

    def __init__(
        self,
        secret: str,
        time_authority: TimeAuthorityProtocol,
        default_ttl: timedelta = DEFAULT_TOKEN_TTL,
    ) -> None:
        """Initialize the codec.

        Args:
            secret: Server-held HMAC key.
            time_authority: Source of the current time.
            default_ttl: Lifetime of issued tokens.
        """
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._key = secret.encode("utf-8")
        self._time = time_authority
        self._default_ttl = default_ttl

    def _mac(self, message: bytes) -> str:
        return hmac.new(self._key, message, hashlib.sha256).hexdigest()

    def issue(
        self,
        signature_id: UUID,
        petition_id: UUID,
        *,
        ttl: timedelta | None = None,
    ) -> str:
        """Mint a token bound to a signature and its petition.

        Args:
            signature_id: Signature to confirm.
            petition_id: Petition the signature belongs to.
            ttl: Lifetime override. Negative values mint already-expired tokens.

        Returns:
            URL-safe token string.
        """
        lifetime = self._default_ttl if ttl is None else ttl
        payload = ConfirmationTokenPayload(
            signature_id=signature_id,
            petition_id=petition_id,
            expires_at_ms=to_epoch_ms(self._time.utcnow() + lifetime),
        )
        envelope = {"d": payload.to_dict(), "s": self._mac(payload.canonical_bytes())}
        return _b64url_encode(canonical_json(envelope))

    def verify(self, token: str) -> ConfirmationTokenPayload | None:
        """Verify a token.

        Fails closed on malformed structure, MAC mismatch and expiry. The
        caller cannot tell these apart.

        Args:
            token: Token string from the confirmation link.

        Returns:
            The payload, or None if the token is invalid or expired.
        """
        try:
            payload = self._verify(token)
        except _TokenRejected as rejected:
            logger.info("confirmation_token_rejected", reason=rejected.reason)
            return None
        except Exception as e:
            logger.warning(
                "confirmation_token_rejected",
                reason="malformed",
                error_type=type(e).__name__,
            )
            return None
        return payload

    def _verify(self, token: Any) -> ConfirmationTokenPayload:
        if not isinstance(token, str) or not token:
            raise _TokenRejected("malformed")

        raw = _b64url_decode(token)
        try:
            envelope = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValueError, RecursionError) as e:
            raise _TokenRejected("malformed") from e

        if not isinstance(envelope, dict):
            raise _TokenRejected("malformed")
        data = envelope.get("d")
        mac = envelope.get("s")
        if not isinstance(data, dict) or not isinstance(mac, str):
            raise _TokenRejected("malformed")

        if not mac.isascii():
            raise _TokenRejected("bad_mac")
        expected = self._mac(canonical_json(data))
        if not hmac.compare_digest(expected.encode("ascii"), mac.encode("ascii")):
            raise _TokenRejected("bad_mac")

        try:
            payload = ConfirmationTokenPayload.from_dict(data)
        except MalformedTokenPayloadError as e:
            raise _TokenRejected("malformed") from e

        if payload.is_expired(self._time.utcnow()):
            raise _TokenRejected("expired")
        return payload
