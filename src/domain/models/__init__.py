"""Domain models for petition signatures."""

from src.domain.models.confirmation_token import ConfirmationTokenPayload
from src.domain.models.petition import Petition, PetitionStatus
from src.domain.models.signature import (
    Signature,
    SignatureStatus,
    mask_email,
    normalize_email,
)
from src.domain.models.signer_view import SignerRecord, SignerView, extract_first_name

__all__: list[str] = [
    "ConfirmationTokenPayload",
    "Petition",
    "PetitionStatus",
    "Signature",
    "SignatureStatus",
    "SignerRecord",
    "SignerView",
    "extract_first_name",
    "mask_email",
    "normalize_email",
]
