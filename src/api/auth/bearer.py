"""Bearer credential extraction.

Reads ``Authorization: Bearer <credential>``. A missing header, another
scheme or an empty credential all yield None; verification of the
credential itself happens in SignerListingService.
"""

from typing import Annotated

from fastapi import Header

BEARER_PREFIX = "bearer "


def parse_bearer_credential(authorization: str | None) -> str | None:
    """Extract the credential from an Authorization header value.

    Example:
        >>> parse_bearer_credential("Bearer abc")
        'abc'
        >>> parse_bearer_credential("Basic abc") is None
        True
    """
    if not authorization or not authorization.lower().startswith(BEARER_PREFIX):
        return None
    credential = authorization[len(BEARER_PREFIX) :].strip()
    return credential or None


def get_bearer_credential(
    authorization: Annotated[
        str | None,
        Header(description="Bearer credential issued by the identity provider"),
    ] = None,
) -> str | None:
    """FastAPI dependency returning the bearer credential, if any."""
    return parse_bearer_credential(authorization)
