"""Error response model (RFC 7807 problem details plus ``error``)."""

from typing import Any

from pydantic import BaseModel, Field


class ProblemResponse(BaseModel):
    """Problem details body returned for every failed request.

    Attributes:
        type: URN identifying the problem type.
        title: Short summary of the problem type.
        status: HTTP status code.
        detail: Caller-facing explanation.
        error: Same caller-facing message, for clients reading ``{error}``.
        instance: Request URL the problem occurred on.
        details: Field-level problems (validation failures only).
    """

    type: str
    title: str
    status: int
    detail: str
    error: str
    instance: str | None = None
    details: list[dict[str, Any]] | None = Field(default=None)
