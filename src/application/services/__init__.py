"""Application services for petition signatures."""

from src.application.services.confirmation_token_service import (
    ConfirmationTokenCodec,
)
from src.application.services.petition_catalog_service import PetitionCatalogService
from src.application.services.signature_confirmation_service import (
    SignatureConfirmationResult,
    SignatureConfirmationService,
)
from src.application.services.signature_intake_service import (
    SignatureIntakeResult,
    SignatureIntakeService,
)
from src.application.services.signer_listing_service import (
    SignerListingService,
    SignerPage,
    clamp_pagination,
)
from src.application.services.time_authority_service import SystemTimeAuthority

__all__ = [
    "ConfirmationTokenCodec",
    "PetitionCatalogService",
    "SignatureConfirmationResult",
    "SignatureConfirmationService",
    "SignatureIntakeResult",
    "SignatureIntakeService",
    "SignerListingService",
    "SignerPage",
    "SystemTimeAuthority",
    "clamp_pagination",
]
