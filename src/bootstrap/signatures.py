"""Bootstrap wiring for signature intake, confirmation and listing.

Adapters are selected from SignatureConfig:
- DATABASE_URL set: PostgreSQL repositories, else in-memory stubs
- EMAIL_API_URL set: HTTP email dispatcher, else the capturing stub
- AUTH_API_URL set: HTTP credential verifier, else the dict-backed stub

All getters return process-wide singletons; the set_* functions replace
one for tests and reset_signature_dependencies() clears them all.
"""

from __future__ import annotations

from datetime import timedelta

from structlog import get_logger

from src.application.ports.confirmation_token import ConfirmationTokenCodecProtocol
from src.application.ports.credential_verifier import CredentialVerifierProtocol
from src.application.ports.email_dispatcher import ConfirmationEmailDispatcherProtocol
from src.application.ports.petition_repository import PetitionRepositoryProtocol
from src.application.ports.signature_repository import SignatureRepositoryProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.confirmation_token_service import ConfirmationTokenCodec
from src.application.services.petition_catalog_service import PetitionCatalogService
from src.application.services.signature_confirmation_service import (
    SignatureConfirmationService,
)
from src.application.services.signature_intake_service import SignatureIntakeService
from src.application.services.signer_listing_service import SignerListingService
from src.application.services.time_authority_service import SystemTimeAuthority
from src.config.signature_config import SignatureConfig
from src.infrastructure.stubs.credential_verifier_stub import CredentialVerifierStub
from src.infrastructure.stubs.email_dispatcher_stub import (
    ConfirmationEmailDispatcherStub,
)
from src.infrastructure.stubs.petition_repository_stub import PetitionRepositoryStub
from src.infrastructure.stubs.signature_repository_stub import SignatureRepositoryStub

logger = get_logger()

_config: SignatureConfig | None = None
_time_authority: TimeAuthorityProtocol | None = None
_petition_repository: PetitionRepositoryProtocol | None = None
_signature_repository: SignatureRepositoryProtocol | None = None
_token_codec: ConfirmationTokenCodecProtocol | None = None
_email_dispatcher: ConfirmationEmailDispatcherProtocol | None = None
_credential_verifier: CredentialVerifierProtocol | None = None


def get_signature_config() -> SignatureConfig:
    """Get signature configuration, read from the environment on first use."""
    global _config
    if _config is None:
        _config = SignatureConfig.from_environment()
        if _config.uses_development_secret and _config.is_production:
            logger.warning(
                "development_signing_secret_in_production",
                message="SIGNING_SECRET is not set; confirmation tokens can be forged",
            )
    return _config


def set_signature_config(config: SignatureConfig) -> None:
    """Set signature configuration (testing/override)."""
    global _config
    _config = config


def get_time_authority() -> TimeAuthorityProtocol:
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    global _time_authority
    _time_authority = time_authority


def _init_repositories() -> tuple[PetitionRepositoryProtocol, SignatureRepositoryProtocol]:
    """Create the petition and signature repositories together.

    The in-memory signature stub needs the petition stub it increments.
    """
    global _petition_repository, _signature_repository
    config = get_signature_config()

    if config.database_url:
        try:
            from src.bootstrap.database import get_session_factory
            from src.infrastructure.adapters.persistence import (
                PostgresPetitionRepository,
                PostgresSignatureRepository,
            )

            session_factory = get_session_factory(config.database_url)
            petition_repository = PostgresPetitionRepository(session_factory)
            signature_repository = PostgresSignatureRepository(session_factory)
            _petition_repository = petition_repository
            _signature_repository = signature_repository
            logger.info("signature_repositories_initialized", repository_type="PostgreSQL")
            return petition_repository, signature_repository
        except Exception as e:
            logger.error(
                "postgres_repository_init_failed",
                error=str(e),
                message="Falling back to in-memory stubs",
            )
    else:
        logger.warning(
            "signature_repositories_initialized",
            repository_type="InMemoryStub",
            message="DATABASE_URL not set - using in-memory stubs (data will not persist)",
        )

    petitions = PetitionRepositoryStub()
    signatures = SignatureRepositoryStub(petitions)
    _petition_repository = petitions
    _signature_repository = signatures
    return petitions, signatures


def get_petition_repository() -> PetitionRepositoryProtocol:
    if _petition_repository is None:
        return _init_repositories()[0]
    return _petition_repository


def get_signature_repository() -> SignatureRepositoryProtocol:
    if _signature_repository is None:
        return _init_repositories()[1]
    return _signature_repository


def set_repositories(
    petition_repository: PetitionRepositoryProtocol,
    signature_repository: SignatureRepositoryProtocol,
) -> None:
    """Set both repositories (testing/override)."""
    global _petition_repository, _signature_repository
    _petition_repository = petition_repository
    _signature_repository = signature_repository


def get_token_codec() -> ConfirmationTokenCodecProtocol:
    global _token_codec
    if _token_codec is None:
        config = get_signature_config()
        _token_codec = ConfirmationTokenCodec(
            secret=config.signing_secret,
            time_authority=get_time_authority(),
            default_ttl=timedelta(hours=config.token_ttl_hours),
        )
    return _token_codec


def get_email_dispatcher() -> ConfirmationEmailDispatcherProtocol:
    global _email_dispatcher
    if _email_dispatcher is None:
        config = get_signature_config()
        if config.email_api_url:
            from src.infrastructure.adapters.email import HttpConfirmationEmailDispatcher

            _email_dispatcher = HttpConfirmationEmailDispatcher(
                api_url=config.email_api_url,
                api_key=config.email_api_key,
                sender=config.email_from,
                public_base_url=config.public_base_url,
            )
            logger.info("email_dispatcher_initialized", dispatcher_type="HTTP")
        else:
            logger.warning(
                "email_dispatcher_initialized",
                dispatcher_type="Stub",
                message="EMAIL_API_URL not set - confirmation emails are captured, not sent",
            )
            _email_dispatcher = ConfirmationEmailDispatcherStub()
    return _email_dispatcher


def set_email_dispatcher(dispatcher: ConfirmationEmailDispatcherProtocol) -> None:
    global _email_dispatcher
    _email_dispatcher = dispatcher


def get_credential_verifier() -> CredentialVerifierProtocol:
    global _credential_verifier
    if _credential_verifier is None:
        config = get_signature_config()
        if config.auth_api_url:
            from src.infrastructure.adapters.auth import HttpCredentialVerifier

            _credential_verifier = HttpCredentialVerifier(
                api_url=config.auth_api_url,
                api_key=config.auth_api_key,
            )
            logger.info("credential_verifier_initialized", verifier_type="HTTP")
        else:
            logger.warning(
                "credential_verifier_initialized",
                verifier_type="Stub",
                message="AUTH_API_URL not set - no credential will verify",
            )
            _credential_verifier = CredentialVerifierStub()
    return _credential_verifier


def set_credential_verifier(verifier: CredentialVerifierProtocol) -> None:
    global _credential_verifier
    _credential_verifier = verifier


def get_signature_intake_service() -> SignatureIntakeService:
    """Build the intake service from the current singletons."""
    return SignatureIntakeService(
        petition_repo=get_petition_repository(),
        signature_repo=get_signature_repository(),
        token_codec=get_token_codec(),
        email_dispatcher=get_email_dispatcher(),
        time_authority=get_time_authority(),
    )


def get_signature_confirmation_service() -> SignatureConfirmationService:
    return SignatureConfirmationService(
        signature_repo=get_signature_repository(),
        token_codec=get_token_codec(),
        time_authority=get_time_authority(),
    )


def get_signer_listing_service() -> SignerListingService:
    config = get_signature_config()
    return SignerListingService(
        signature_repo=get_signature_repository(),
        credential_verifier=get_credential_verifier(),
        default_limit=config.signer_list_default_limit,
        max_limit=config.signer_list_max_limit,
    )


def get_petition_catalog_service() -> PetitionCatalogService:
    return PetitionCatalogService(
        petition_repo=get_petition_repository(),
        catalog_size=get_signature_config().public_petition_list_limit,
    )


def reset_signature_dependencies() -> None:
    """Reset signature dependency singletons."""
    global _config
    global _time_authority
    global _petition_repository
    global _signature_repository
    global _token_codec
    global _email_dispatcher
    global _credential_verifier

    _config = None
    _time_authority = None
    _petition_repository = None
    _signature_repository = None
    _token_codec = None
    _email_dispatcher = None
    _credential_verifier = None
