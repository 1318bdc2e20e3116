"""Signature API dependencies.

Thin FastAPI dependency functions over the bootstrap composition root.
Tests replace them through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from src.api.auth.bearer import get_bearer_credential
from src.application.ports.credential_verifier import CallerIdentity
from src.application.services.petition_catalog_service import PetitionCatalogService
from src.application.services.signature_confirmation_service import (
    SignatureConfirmationService,
)
from src.application.services.signature_intake_service import SignatureIntakeService
from src.application.services.signer_listing_service import SignerListingService
from src.bootstrap.metrics import SignatureMetrics, get_signature_metrics
from src.bootstrap.signatures import (
    get_petition_catalog_service,
    get_signature_config,
    get_signature_confirmation_service,
    get_signature_intake_service,
    get_signer_listing_service,
)
from src.config.signature_config import SignatureConfig
from src.domain.errors import SignatureServiceError, UnauthorizedError


def get_intake_service() -> SignatureIntakeService:
    return get_signature_intake_service()


def get_confirmation_service() -> SignatureConfirmationService:
    return get_signature_confirmation_service()


def get_listing_service() -> SignerListingService:
    return get_signer_listing_service()


def get_catalog_service() -> PetitionCatalogService:
    return get_petition_catalog_service()


def get_config() -> SignatureConfig:
    return get_signature_config()


def get_metrics() -> SignatureMetrics:
    return get_signature_metrics()


async def get_authenticated_caller(
    credential: str | None = Depends(get_bearer_credential),
    service: SignerListingService = Depends(get_listing_service),
    metrics: SignatureMetrics = Depends(get_metrics),
) -> CallerIdentity:
    """Authenticate the caller before any path or query parameter is validated.

    FastAPI resolves sub-dependencies ahead of the endpoint's own
    parameters, so an unauthenticated request is answered with 401 whatever
    else is wrong with it.
    """
    try:
        return await service.authenticate(credential)
    except UnauthorizedError:
        metrics.record_signer_list("unauthorized")
        raise
    except SignatureServiceError:
        metrics.record_signer_list("error")
        raise


def get_client_ip(request: Request) -> str | None:
    """Best-effort client address for the audit trail.

    First entry of X-Forwarded-For, else X-Real-IP, else the socket peer.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    return request.client.host if request.client else None


def get_user_agent(request: Request) -> str | None:
    return request.headers.get("user-agent")
