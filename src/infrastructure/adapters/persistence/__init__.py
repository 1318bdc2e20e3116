"""PostgreSQL persistence adapters."""

from src.infrastructure.adapters.persistence.petition_repository import (
    PostgresPetitionRepository,
)
from src.infrastructure.adapters.persistence.signature_repository import (
    PostgresSignatureRepository,
)

__all__: list[str] = ["PostgresPetitionRepository", "PostgresSignatureRepository"]
