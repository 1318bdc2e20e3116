"""Signature submission and confirmation routes.

- POST /signatures: create an unconfirmed signature and send the link
- GET /confirm?token=: redeem the link, then redirect to the petition page

Developer Golden Rules:
1. VALIDATE EARLY - Pydantic rejects bad bodies before the service runs
2. ONE MESSAGE PER OUTCOME - Invalid, expired and tampered links look the same
3. FAIL LOUD - Errors leave as RFC 7807 bodies via src.api.errors
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from src.api.dependencies.signatures import (
    get_client_ip,
    get_config,
    get_confirmation_service,
    get_intake_service,
    get_metrics,
    get_user_agent,
)
from src.api.models.error import ProblemResponse
from src.api.models.signature import SubmitSignatureRequest, SubmitSignatureResponse
from src.application.services.signature_confirmation_service import (
    SignatureConfirmationService,
)
from src.application.services.signature_intake_service import SignatureIntakeService
from src.bootstrap.metrics import SignatureMetrics
from src.config.signature_config import SignatureConfig
from src.domain.errors import (
    AlreadySignedError,
    InvalidConfirmationTokenError,
    PetitionNotFoundError,
    SignatureAlreadyConfirmedError,
    SignatureNotFoundError,
    SignatureServiceError,
)

router = APIRouter(tags=["signatures"])

_SUBMISSION_OUTCOMES: dict[type[SignatureServiceError], str] = {
    AlreadySignedError: "duplicate",
    PetitionNotFoundError: "not_found",
}

_CONFIRMATION_OUTCOMES: dict[type[SignatureServiceError], str] = {
    InvalidConfirmationTokenError: "invalid_token",
    SignatureAlreadyConfirmedError: "already_confirmed",
    SignatureNotFoundError: "not_found",
}


def petition_page_url(public_base_url: str, petition_id: object) -> str:
    """URL of the petition page with the confirmation indicator set."""
    return f"{public_base_url.rstrip('/')}/petitions/{petition_id}?confirmed=true"


@router.post(
    "/signatures",
    response_model=SubmitSignatureResponse,
    responses={
        400: {"model": ProblemResponse, "description": "Invalid request data"},
        404: {"model": ProblemResponse, "description": "Petition not found or not public"},
        409: {"model": ProblemResponse, "description": "Email already signed this petition"},
        500: {"model": ProblemResponse, "description": "Unexpected failure"},
    },
    summary="Sign a petition",
    description=(
        "Create an unconfirmed signature and email a confirmation link. "
        "The signature counts once the link is opened."
    ),
)
async def submit_signature(
    request_data: SubmitSignatureRequest,
    service: SignatureIntakeService = Depends(get_intake_service),
    metrics: SignatureMetrics = Depends(get_metrics),
    ip: str | None = Depends(get_client_ip),
    user_agent: str | None = Depends(get_user_agent),
) -> SubmitSignatureResponse:
    try:
        result = await service.submit_signature(
            petition_id=request_data.petition_id,
            name=request_data.name,
            email=request_data.email,
            comment=request_data.comment,
            ip=ip,
            user_agent=user_agent,
        )
    except SignatureServiceError as e:
        metrics.record_submission(_SUBMISSION_OUTCOMES.get(type(e), "error"))
        raise

    metrics.record_submission("accepted")
    metrics.record_email(result.email_sent)
    return SubmitSignatureResponse(success=True, message=result.message)


@router.get(
    "/confirm",
    response_class=RedirectResponse,
    status_code=307,
    responses={
        307: {"description": "Confirmed; redirect to the petition page"},
        400: {"model": ProblemResponse, "description": "Invalid, expired or used link"},
        500: {"model": ProblemResponse, "description": "Unexpected failure"},
    },
    summary="Confirm a signature",
)
async def confirm_signature(
    token: str | None = Query(default=None, description="Confirmation token"),
    service: SignatureConfirmationService = Depends(get_confirmation_service),
    config: SignatureConfig = Depends(get_config),
    metrics: SignatureMetrics = Depends(get_metrics),
) -> RedirectResponse:
    """Redeem a confirmation link exactly once."""
    try:
        result = await service.confirm(token)
    except SignatureServiceError as e:
        metrics.record_confirmation(_CONFIRMATION_OUTCOMES.get(type(e), "error"))
        raise

    metrics.record_confirmation("confirmed")
    return RedirectResponse(
        url=petition_page_url(config.public_base_url, result.petition_id),
        status_code=307,
    )
