"""Exception handlers translating errors into RFC 7807 responses.

Every failure leaves the service as a problem-details body carrying an
``error`` member with the caller-facing message. Internal detail (stack
traces, store errors) is logged and never returned.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.errors import (
    InternalServiceError,
    SignatureServiceError,
    SignatureValidationError,
)

logger = structlog.get_logger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_response(error: SignatureServiceError, request: Request) -> JSONResponse:
    """Render a domain error as an RFC 7807 JSON response."""
    headers = {"WWW-Authenticate": "Bearer"} if error.status_code == 401 else None
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_rfc7807_dict(instance=str(request.url.path)),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _validation_details(exc: RequestValidationError) -> list[dict[str, Any]]:
    details = []
    for err in exc.errors():
        location = [str(part) for part in err.get("loc", ()) if part not in ("body", "query")]
        details.append(
            {
                "field": ".".join(location) or "body",
                "message": err.get("msg", "Invalid value"),
            }
        )
    return details


async def signature_error_handler(
    request: Request, exc: SignatureServiceError
) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_internal_error",
            problem_type=exc.problem_type,
            path=request.url.path,
        )
    return problem_response(exc, request)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    details = _validation_details(exc)
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        fields=[d["field"] for d in details],
    )
    return problem_response(SignatureValidationError(details=details), request)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return problem_response(InternalServiceError("unhandled"), request)


def register_error_handlers(app: FastAPI) -> None:
    """Install the problem-details handlers on an application."""
    app.add_exception_handler(SignatureServiceError, signature_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
