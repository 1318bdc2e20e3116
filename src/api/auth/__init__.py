"""Request authentication helpers."""

from src.api.auth.bearer import get_bearer_credential, parse_bearer_credential

__all__: list[str] = ["get_bearer_credential", "parse_bearer_credential"]
