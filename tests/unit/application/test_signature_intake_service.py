"""Unit tests for SignatureIntakeService.

Tests cover:
- successful submission stores one unconfirmed signature and emails a token
- duplicate email (any case) returns AlreadySignedError with one stored row
- draft, closed and missing petitions report PetitionNotFoundError
- email dispatch failure is swallowed
- storage constraint race surfaces as AlreadySignedError
- store failures become InternalServiceError
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.application.services.signature_intake_service import (
    SIGNATURE_PENDING_MESSAGE,
    SignatureIntakeService,
)
from src.domain.errors import (
    AlreadySignedError,
    InternalServiceError,
    PetitionNotFoundError,
)
from src.domain.models.petition import PetitionStatus
from src.domain.models.signature import SignatureStatus
from src.infrastructure.stubs import (
    ConfirmationEmailDispatcherStub,
    PetitionRepositoryStub,
    SignatureRepositoryStub,
)
from tests.helpers import make_petition


class TestSubmitSignature:
    async def test_creates_unconfirmed_signature(
        self,
        intake_service: SignatureIntakeService,
        signature_repo: SignatureRepositoryStub,
        public_petition,
    ) -> None:
        result = await intake_service.submit_signature(
            petition_id=public_petition.id,
            name="  Jane Doe ",
            email=" Jane.Doe@Example.org ",
            comment="Count me in",
            ip="203.0.113.7",
            user_agent="pytest",
        )

        stored = await signature_repo.get(result.signature_id)
        assert stored is not None
        assert stored.status is SignatureStatus.UNCONFIRMED
        assert stored.confirmed_at is None
        assert stored.name == "Jane Doe"
        assert stored.email_normalized == "jane.doe@example.org"
        assert stored.ip == "203.0.113.7"
        assert stored.user_agent == "pytest"
        assert result.message == SIGNATURE_PENDING_MESSAGE
        assert result.email_sent is True

    async def test_sends_token_bound_to_new_signature(
        self,
        intake_service: SignatureIntakeService,
        email_dispatcher: ConfirmationEmailDispatcherStub,
        token_codec,
        public_petition,
    ) -> None:
        result = await intake_service.submit_signature(
            petition_id=public_petition.id,
            name="Jane Doe",
            email="jane@example.org",
        )

        assert len(email_dispatcher.sent) == 1
        sent = email_dispatcher.sent[0]
        assert sent.email == "jane@example.org"
        assert sent.petition_title == public_petition.title
        payload = token_codec.verify(sent.token)
        assert payload is not None
        assert payload.signature_id == result.signature_id
        assert payload.petition_id == public_petition.id

    async def test_does_not_touch_signature_count(
        self,
        intake_service: SignatureIntakeService,
        petition_repo: PetitionRepositoryStub,
        public_petition,
    ) -> None:
        await intake_service.submit_signature(
            petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
        )

        petition = await petition_repo.get(public_petition.id)
        assert petition.signature_count == 0


class TestDuplicates:
    async def test_second_submission_conflicts_with_one_row(
        self,
        intake_service: SignatureIntakeService,
        signature_repo: SignatureRepositoryStub,
        public_petition,
    ) -> None:
        await intake_service.submit_signature(
            petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
        )

        with pytest.raises(AlreadySignedError):
            await intake_service.submit_signature(
                petition_id=public_petition.id,
                name="Jane Again",
                email="JANE@EXAMPLE.ORG",
            )

        assert len(signature_repo.all_signatures()) == 1

    async def test_same_email_may_sign_other_petitions(
        self,
        intake_service: SignatureIntakeService,
        petition_repo: PetitionRepositoryStub,
        signature_repo: SignatureRepositoryStub,
        public_petition,
    ) -> None:
        other = petition_repo.add_petition(make_petition())

        await intake_service.submit_signature(
            petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
        )
        await intake_service.submit_signature(
            petition_id=other.id, name="Jane Doe", email="jane@example.org"
        )

        assert len(signature_repo.all_signatures()) == 2

    async def test_constraint_race_surfaces_as_conflict(
        self,
        petition_repo: PetitionRepositoryStub,
        token_codec,
        email_dispatcher,
        fake_time_authority,
        public_petition,
    ) -> None:
        racing_repo = AsyncMock()
        racing_repo.get_by_petition_and_email = AsyncMock(return_value=None)
        racing_repo.create = AsyncMock(
            side_effect=AlreadySignedError(petition_id=public_petition.id)
        )
        service = SignatureIntakeService(
            petition_repo=petition_repo,
            signature_repo=racing_repo,
            token_codec=token_codec,
            email_dispatcher=email_dispatcher,
            time_authority=fake_time_authority,
        )

        with pytest.raises(AlreadySignedError):
            await service.submit_signature(
                petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
            )
        assert email_dispatcher.sent == []


class TestPetitionAvailability:
    @pytest.mark.parametrize(
        "status",
        [PetitionStatus.DRAFT, PetitionStatus.CLOSED, PetitionStatus.ARCHIVED],
    )
    async def test_non_public_petition_not_found(
        self,
        intake_service: SignatureIntakeService,
        petition_repo: PetitionRepositoryStub,
        signature_repo: SignatureRepositoryStub,
        status: PetitionStatus,
    ) -> None:
        petition = petition_repo.add_petition(make_petition(status=status))

        with pytest.raises(PetitionNotFoundError):
            await intake_service.submit_signature(
                petition_id=petition.id, name="Jane Doe", email="jane@example.org"
            )
        assert signature_repo.all_signatures() == []

    async def test_missing_petition_not_found(
        self, intake_service: SignatureIntakeService
    ) -> None:
        with pytest.raises(PetitionNotFoundError):
            await intake_service.submit_signature(
                petition_id=uuid4(), name="Jane Doe", email="jane@example.org"
            )


class TestEmailFailure:
    async def test_dispatch_failure_is_swallowed(
        self,
        intake_service: SignatureIntakeService,
        email_dispatcher: ConfirmationEmailDispatcherStub,
        signature_repo: SignatureRepositoryStub,
        public_petition,
    ) -> None:
        email_dispatcher.fail = True

        result = await intake_service.submit_signature(
            petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
        )

        assert result.email_sent is False
        assert await signature_repo.get(result.signature_id) is not None

    async def test_unexpected_dispatcher_error_is_swallowed(
        self,
        petition_repo,
        signature_repo,
        token_codec,
        fake_time_authority,
        public_petition,
    ) -> None:
        dispatcher = AsyncMock()
        dispatcher.send = AsyncMock(side_effect=RuntimeError("smtp down"))
        service = SignatureIntakeService(
            petition_repo=petition_repo,
            signature_repo=signature_repo,
            token_codec=token_codec,
            email_dispatcher=dispatcher,
            time_authority=fake_time_authority,
        )

        result = await service.submit_signature(
            petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
        )

        assert result.email_sent is False
        dispatcher.send.assert_awaited_once()


class TestStoreFailures:
    async def test_petition_lookup_failure(
        self, signature_repo, token_codec, email_dispatcher, fake_time_authority
    ) -> None:
        petition_repo = AsyncMock()
        petition_repo.get = AsyncMock(side_effect=ConnectionError("db down"))
        service = SignatureIntakeService(
            petition_repo=petition_repo,
            signature_repo=signature_repo,
            token_codec=token_codec,
            email_dispatcher=email_dispatcher,
            time_authority=fake_time_authority,
        )

        with pytest.raises(InternalServiceError) as exc_info:
            await service.submit_signature(
                petition_id=uuid4(), name="Jane Doe", email="jane@example.org"
            )
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    async def test_insert_failure(
        self,
        petition_repo,
        token_codec,
        email_dispatcher,
        fake_time_authority,
        public_petition,
    ) -> None:
        failing_repo = AsyncMock()
        failing_repo.get_by_petition_and_email = AsyncMock(return_value=None)
        failing_repo.create = AsyncMock(side_effect=OSError("disk full"))
        service = SignatureIntakeService(
            petition_repo=petition_repo,
            signature_repo=failing_repo,
            token_codec=token_codec,
            email_dispatcher=email_dispatcher,
            time_authority=fake_time_authority,
        )

        with pytest.raises(InternalServiceError):
            await service.submit_signature(
                petition_id=public_petition.id, name="Jane Doe", email="jane@example.org"
            )
        assert email_dispatcher.sent == []
