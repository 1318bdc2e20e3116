"""
Domain layer - Pure business logic for petition signatures.

This layer contains:
- Domain models (Petition, Signature, SignerView, ConfirmationTokenPayload)
- Value helpers (email normalization, first-name extraction)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import PetitionServiceError

__all__: list[str] = ["PetitionServiceError"]
