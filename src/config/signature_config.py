"""Signature service configuration.

Configuration for confirmation tokens, signer listing pagination, the
public petition catalogue and external collaborators, with environment
variable overrides for deployment.

Environment Variables (Tokens):
- SIGNING_SECRET: HMAC key for confirmation tokens (default: development key)
- CONFIRMATION_TOKEN_TTL_HOURS: Token lifetime in hours (default: 24)

Environment Variables (Listing):
- SIGNER_LIST_DEFAULT_LIMIT: Default signer page size (default: 50)
- SIGNER_LIST_MAX_LIMIT: Hard cap on signer page size (default: 200)
- PUBLIC_PETITION_LIST_LIMIT: Size of the public catalogue (default: 50)

Environment Variables (Collaborators):
- PUBLIC_BASE_URL: Site origin for confirmation links and redirects
- DATABASE_URL: PostgreSQL URL; in-memory stores are used when unset
- EMAIL_API_URL / EMAIL_API_KEY / EMAIL_FROM: Transactional email HTTP API
- AUTH_API_URL / AUTH_API_KEY: Identity provider user endpoint
- ENVIRONMENT: "production" or "development" (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEVELOPMENT_SIGNING_SECRET = "dev-secret-change-in-prod"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_optional_env(key: str) -> str | None:
    """Get a string environment variable, treating blank as unset."""
    value = os.environ.get(key, "").strip()
    return value or None


@dataclass(frozen=True)
class SignatureConfig:
    """Configuration for the signature service.

    Attributes:
        signing_secret: HMAC key for confirmation tokens. Whoever holds it
            can forge confirmations.
        token_ttl_hours: Confirmation token lifetime. Default: 24 hours.
        signer_list_default_limit: Page size when none is requested. Default: 50.
        signer_list_max_limit: Largest page ever served. Default: 200.
        public_petition_list_limit: Petitions in the public catalogue. Default: 50.
        public_base_url: Site origin used in links and redirects.
        environment: Deployment environment name.
        database_url: PostgreSQL URL, or None for in-memory stores.
        email_api_url: Email HTTP API endpoint, or None for the stub dispatcher.
        email_api_key: Bearer key for the email API.
        email_from: Sender address for confirmation emails.
        auth_api_url: Identity provider user endpoint, or None for the stub verifier.
        auth_api_key: API key sent to the identity provider.
    """

    signing_secret: str = DEVELOPMENT_SIGNING_SECRET
    token_ttl_hours: int = 24
    signer_list_default_limit: int = 50
    signer_list_max_limit: int = 200
    public_petition_list_limit: int = 50
    public_base_url: str = "http://localhost:3000"
    environment: str = "development"
    database_url: str | None = None
    email_api_url: str | None = None
    email_api_key: str | None = None
    email_from: str = "petitions@localhost"
    auth_api_url: str | None = None
    auth_api_key: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.signing_secret:
            raise ValueError("signing_secret must not be empty")
        if self.token_ttl_hours < 1:
            raise ValueError(
                f"token_ttl_hours must be positive, got {self.token_ttl_hours}"
            )
        if self.signer_list_max_limit < 1:
            raise ValueError(
                f"signer_list_max_limit must be positive, got {self.signer_list_max_limit}"
            )
        if not 1 <= self.signer_list_default_limit <= self.signer_list_max_limit:
            raise ValueError(
                f"signer_list_default_limit ({self.signer_list_default_limit}) must be "
                f"between 1 and signer_list_max_limit ({self.signer_list_max_limit})"
            )
        if self.public_petition_list_limit < 1:
            raise ValueError(
                "public_petition_list_limit must be positive, "
                f"got {self.public_petition_list_limit}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def uses_development_secret(self) -> bool:
        return self.signing_secret == DEVELOPMENT_SIGNING_SECRET

    @classmethod
    def from_environment(cls) -> "SignatureConfig":
        """Create config from environment variables with defaults.

        Returns:
            SignatureConfig with values from environment or defaults.
        """
        return cls(
            signing_secret=os.environ.get("SIGNING_SECRET")
            or DEVELOPMENT_SIGNING_SECRET,
            token_ttl_hours=_get_int_env("CONFIRMATION_TOKEN_TTL_HOURS", 24),
            signer_list_default_limit=_get_int_env("SIGNER_LIST_DEFAULT_LIMIT", 50),
            signer_list_max_limit=_get_int_env("SIGNER_LIST_MAX_LIMIT", 200),
            public_petition_list_limit=_get_int_env("PUBLIC_PETITION_LIST_LIMIT", 50),
            public_base_url=(
                _get_optional_env("PUBLIC_BASE_URL") or "http://localhost:3000"
            ).rstrip("/"),
            environment=_get_optional_env("ENVIRONMENT") or "development",
            database_url=_get_optional_env("DATABASE_URL"),
            email_api_url=_get_optional_env("EMAIL_API_URL"),
            email_api_key=_get_optional_env("EMAIL_API_KEY"),
            email_from=_get_optional_env("EMAIL_FROM") or "petitions@localhost",
            auth_api_url=_get_optional_env("AUTH_API_URL"),
            auth_api_key=_get_optional_env("AUTH_API_KEY"),
        )


# Default config with built-in values
DEFAULT_SIGNATURE_CONFIG = SignatureConfig()

# Testing config with a fixed secret and small pages
TEST_SIGNATURE_CONFIG = SignatureConfig(
    signing_secret="test-signing-secret",
    signer_list_default_limit=10,
    signer_list_max_limit=20,
    public_petition_list_limit=5,
    public_base_url="http://testserver",
)
