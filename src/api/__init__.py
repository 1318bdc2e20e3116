"""
API layer - FastAPI routes and HTTP concerns for petition signatures.

This layer contains:
- FastAPI route definitions
- Request/Response DTOs
- HTTP middleware
- RFC 7807 error translation

IMPORT RULES:
- CAN import from: application
- CANNOT import from: infrastructure directly
- Uses dependency injection for infrastructure adapters
"""

__all__: list[str] = []
