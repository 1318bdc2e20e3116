"""
Pytest configuration and shared fixtures for petition signature tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async collaborators
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/ and are marked ``integration``
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from src.application.services.confirmation_token_service import ConfirmationTokenCodec
from src.application.services.petition_catalog_service import PetitionCatalogService
from src.application.services.signature_confirmation_service import (
    SignatureConfirmationService,
)
from src.application.services.signature_intake_service import SignatureIntakeService
from src.application.services.signer_listing_service import SignerListingService
from src.infrastructure.stubs import (
    ConfirmationEmailDispatcherStub,
    CredentialVerifierStub,
    PetitionRepositoryStub,
    SignatureRepositoryStub,
)
from tests.helpers import FakeTimeAuthority, make_petition
from tests.helpers.constants import (
    AUTHOR_CREDENTIAL,
    STRANGER_CREDENTIAL,
    TEST_SECRET,
)


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    return FakeTimeAuthority(frozen_at=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def petition_repo() -> PetitionRepositoryStub:
    return PetitionRepositoryStub()


@pytest.fixture
def signature_repo(petition_repo: PetitionRepositoryStub) -> SignatureRepositoryStub:
    return SignatureRepositoryStub(petition_repo)


@pytest.fixture
def email_dispatcher() -> ConfirmationEmailDispatcherStub:
    return ConfirmationEmailDispatcherStub()


@pytest.fixture
def author_id():
    return uuid4()


@pytest.fixture
def stranger_id():
    return uuid4()


@pytest.fixture
def credential_verifier(author_id, stranger_id) -> CredentialVerifierStub:
    return CredentialVerifierStub(
        {AUTHOR_CREDENTIAL: author_id, STRANGER_CREDENTIAL: stranger_id}
    )


@pytest.fixture
def token_codec(fake_time_authority: FakeTimeAuthority) -> ConfirmationTokenCodec:
    return ConfirmationTokenCodec(secret=TEST_SECRET, time_authority=fake_time_authority)


@pytest.fixture
def public_petition(petition_repo: PetitionRepositoryStub, author_id):
    return petition_repo.add_petition(make_petition(author_id=author_id))


@pytest.fixture
def intake_service(
    petition_repo, signature_repo, token_codec, email_dispatcher, fake_time_authority
) -> SignatureIntakeService:
    return SignatureIntakeService(
        petition_repo=petition_repo,
        signature_repo=signature_repo,
        token_codec=token_codec,
        email_dispatcher=email_dispatcher,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def confirmation_service(
    signature_repo, token_codec, fake_time_authority
) -> SignatureConfirmationService:
    return SignatureConfirmationService(
        signature_repo=signature_repo,
        token_codec=token_codec,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def listing_service(signature_repo, credential_verifier) -> SignerListingService:
    return SignerListingService(
        signature_repo=signature_repo,
        credential_verifier=credential_verifier,
    )


@pytest.fixture
def catalog_service(petition_repo) -> PetitionCatalogService:
    return PetitionCatalogService(petition_repo=petition_repo, catalog_size=5)
