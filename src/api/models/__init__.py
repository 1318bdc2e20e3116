"""API request/response models."""

from src.api.models.error import ProblemResponse
from src.api.models.health import HealthResponse
from src.api.models.petition import PetitionListResponse, PetitionSummaryResponse
from src.api.models.signature import SubmitSignatureRequest, SubmitSignatureResponse
from src.api.models.signer import SignerListResponse, SignerResponse

__all__: list[str] = [
    "HealthResponse",
    "PetitionListResponse",
    "PetitionSummaryResponse",
    "ProblemResponse",
    "SignerListResponse",
    "SignerResponse",
    "SubmitSignatureRequest",
    "SubmitSignatureResponse",
]
