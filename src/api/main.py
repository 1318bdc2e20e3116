"""FastAPI application entry point for the petition signatures service."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__
from src.api.errors import register_error_handlers
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.health import router as health_router
from src.api.routes.metrics import router as metrics_router
from src.api.routes.petitions import router as petitions_router
from src.api.routes.signatures import router as signatures_router
from src.api.startup import run_shutdown, run_startup


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    run_startup()
    yield
    await run_shutdown()


def create_app() -> FastAPI:
    """Build the application with middleware, error handlers and routers."""
    application = FastAPI(
        title="Petition Signatures API",
        description="Email-confirmed petition signatures and author-only signer lists",
        version=__version__,
        lifespan=lifespan,
    )
    application.add_middleware(LoggingMiddleware)
    register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(metrics_router)
    application.include_router(signatures_router)
    application.include_router(petitions_router)
    return application


app = create_app()
