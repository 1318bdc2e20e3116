"""Unit tests for lazy repository selection in the signature bootstrap."""

from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest

from src.bootstrap.signatures import (
    get_petition_repository,
    get_signature_repository,
    reset_signature_dependencies,
    set_signature_config,
)
from src.config.signature_config import TEST_SIGNATURE_CONFIG
from src.infrastructure.adapters.persistence import (
    PostgresPetitionRepository,
    PostgresSignatureRepository,
)
from src.infrastructure.stubs import PetitionRepositoryStub, SignatureRepositoryStub

DATABASE_URL = "postgresql://petitions:secret@db:5432/petitions"


@pytest.fixture(autouse=True)
def _reset_bootstrap():
    reset_signature_dependencies()
    yield
    reset_signature_dependencies()


class TestInMemoryRepositories:
    def test_signature_repository_first(self) -> None:
        set_signature_config(replace(TEST_SIGNATURE_CONFIG, database_url=None))

        signatures = get_signature_repository()
        petitions = get_petition_repository()

        assert isinstance(signatures, SignatureRepositoryStub)
        assert isinstance(petitions, PetitionRepositoryStub)
        assert signatures._petitions is petitions

    def test_petition_repository_first(self) -> None:
        set_signature_config(replace(TEST_SIGNATURE_CONFIG, database_url=None))

        petitions = get_petition_repository()

        assert get_signature_repository()._petitions is petitions

    def test_repositories_are_singletons(self) -> None:
        set_signature_config(replace(TEST_SIGNATURE_CONFIG, database_url=None))

        assert get_signature_repository() is get_signature_repository()
        assert get_petition_repository() is get_petition_repository()


class TestPostgresRepositories:
    def test_database_url_selects_postgres(self) -> None:
        set_signature_config(replace(TEST_SIGNATURE_CONFIG, database_url=DATABASE_URL))

        with patch("src.bootstrap.database.get_session_factory", return_value=MagicMock()):
            signatures = get_signature_repository()

        assert isinstance(signatures, PostgresSignatureRepository)
        assert isinstance(get_petition_repository(), PostgresPetitionRepository)

    def test_engine_failure_falls_back_to_stubs(self) -> None:
        set_signature_config(replace(TEST_SIGNATURE_CONFIG, database_url=DATABASE_URL))

        with patch(
            "src.bootstrap.database.get_session_factory",
            side_effect=RuntimeError("engine unavailable"),
        ):
            petitions = get_petition_repository()

        assert isinstance(petitions, PetitionRepositoryStub)
        assert isinstance(get_signature_repository(), SignatureRepositoryStub)
