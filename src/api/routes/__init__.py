"""API routers."""

from src.api.routes.health import router as health_router
from src.api.routes.metrics import router as metrics_router
from src.api.routes.petitions import router as petitions_router
from src.api.routes.signatures import router as signatures_router

__all__: list[str] = [
    "health_router",
    "metrics_router",
    "petitions_router",
    "signatures_router",
]
