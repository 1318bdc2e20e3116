"""Integration tests for the PostgreSQL petition repository."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from src.domain.models.petition import PetitionStatus
from src.infrastructure.adapters.persistence import PostgresPetitionRepository
from tests.integration.sql_helpers import insert_petition

pytestmark = pytest.mark.integration


@pytest.fixture
def repo(session_factory) -> PostgresPetitionRepository:
    return PostgresPetitionRepository(session_factory)


async def test_get(repo, session_factory) -> None:
    petition_id, author_id = await insert_petition(session_factory, slug="river")

    petition = await repo.get(petition_id)

    assert petition is not None
    assert petition.slug == "river"
    assert petition.author_id == author_id
    assert petition.status is PetitionStatus.PUBLIC
    assert petition.signature_count == 0
    assert await repo.get(uuid4()) is None


async def test_slug_lookup_public_only(repo, session_factory) -> None:
    await insert_petition(session_factory, slug="hidden", status=PetitionStatus.DRAFT)
    petition_id, _ = await insert_petition(session_factory, slug="open")

    assert await repo.get_public_by_slug("hidden") is None
    assert (await repo.get_public_by_slug("open")).id == petition_id


async def test_list_public_newest_first(repo, session_factory) -> None:
    ids = []
    for month in (1, 2, 3):
        petition_id, _ = await insert_petition(
            session_factory, created_at=datetime(2026, month, 1, tzinfo=timezone.utc)
        )
        ids.append(petition_id)
    await insert_petition(session_factory, status=PetitionStatus.ARCHIVED)

    listed = await repo.list_public(limit=2)

    assert [p.id for p in listed] == [ids[2], ids[1]]


async def test_list_public_ties_ordered_by_id(repo, session_factory) -> None:
    created_at = datetime(2026, 4, 1, tzinfo=timezone.utc)
    ids = [(await insert_petition(session_factory, created_at=created_at))[0] for _ in range(3)]

    listed = await repo.list_public(limit=10)

    assert [p.id for p in listed] == sorted(ids)
