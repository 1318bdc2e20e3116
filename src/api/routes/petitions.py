"""Petition routes: public catalogue and author-only signer listing.

Signer listing (GET /petitions/{petition_id}/signers):
- 401 without a valid bearer credential, decided before the petition id
  or paging parameters are validated
- 200 with an empty page when the caller does not own the petition,
  identical to an owned petition with no signers
- limit/offset are clamped, never rejected for being out of range
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.api.dependencies.signatures import (
    get_authenticated_caller,
    get_catalog_service,
    get_listing_service,
    get_metrics,
)
from src.api.models.error import ProblemResponse
from src.api.models.petition import PetitionListResponse, PetitionSummaryResponse
from src.api.models.signer import SignerListResponse, SignerResponse
from src.application.ports.credential_verifier import CallerIdentity
from src.application.services.petition_catalog_service import PetitionCatalogService
from src.application.services.signer_listing_service import SignerListingService
from src.bootstrap.metrics import SignatureMetrics
from src.domain.errors import SignatureServiceError
from src.domain.models.petition import Petition

router = APIRouter(prefix="/petitions", tags=["petitions"])


def _to_summary(petition: Petition) -> PetitionSummaryResponse:
    return PetitionSummaryResponse(
        id=petition.id,
        slug=petition.slug,
        title=petition.title,
        summary=petition.summary,
        goal=petition.goal,
        signature_count=petition.signature_count,
        progress_percent=round(petition.progress_percent, 2),
        created_at=petition.created_at,
    )


@router.get(
    "",
    response_model=PetitionListResponse,
    summary="List public petitions",
)
async def list_petitions(
    service: PetitionCatalogService = Depends(get_catalog_service),
) -> PetitionListResponse:
    """Newest public petitions first."""
    petitions = await service.list_public()
    return PetitionListResponse(petitions=[_to_summary(p) for p in petitions])


@router.get(
    "/by-slug/{slug}",
    response_model=PetitionSummaryResponse,
    responses={404: {"model": ProblemResponse, "description": "No public petition"}},
    summary="Get a public petition by slug",
)
async def get_petition_by_slug(
    slug: str,
    service: PetitionCatalogService = Depends(get_catalog_service),
) -> PetitionSummaryResponse:
    petition = await service.get_by_slug(slug)
    return _to_summary(petition)


@router.get(
    "/{petition_id}/signers",
    response_model=SignerListResponse,
    responses={
        400: {"model": ProblemResponse, "description": "Malformed petition id or paging"},
        401: {"model": ProblemResponse, "description": "Missing or invalid credential"},
        500: {"model": ProblemResponse, "description": "Unexpected failure"},
    },
    summary="List confirmed signers (petition author only)",
)
async def list_signers(
    petition_id: UUID,
    limit: int | None = Query(default=None, description="Page size (clamped to 1-max)"),
    offset: int | None = Query(default=None, description="Rows to skip (clamped to >= 0)"),
    caller: CallerIdentity = Depends(get_authenticated_caller),
    service: SignerListingService = Depends(get_listing_service),
    metrics: SignatureMetrics = Depends(get_metrics),
) -> SignerListResponse:
    try:
        page = await service.list_signers_for(
            caller,
            petition_id,
            limit=limit,
            offset=offset,
        )
    except SignatureServiceError:
        metrics.record_signer_list("error")
        raise

    metrics.record_signer_list("served")
    return SignerListResponse(
        signers=[
            SignerResponse(
                first_name=signer.first_name,
                verified=signer.verified,
                confirmed_at=signer.confirmed_at,
            )
            for signer in page.signers
        ],
        total=page.total,
        limit=page.limit,
        offset=page.offset,
    )
