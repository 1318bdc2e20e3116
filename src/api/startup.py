"""Startup and shutdown hooks for the petition signatures API.

Startup:
1. Load a local .env file (development convenience)
2. Configure structured logging
3. Resolve configuration and log the adapters in use

Shutdown:
1. Dispose of the database engine, if one was created

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app):
        run_startup()
        yield
        await run_shutdown()
"""

from dotenv import load_dotenv
from structlog import get_logger

from src.bootstrap.database import close_database_engine
from src.bootstrap.logging import configure_structlog
from src.bootstrap.signatures import get_signature_config

logger = get_logger()


def configure_logging() -> str:
    """Load .env and configure structlog; returns the environment name."""
    load_dotenv()
    return configure_structlog()


def log_configuration() -> None:
    """Log which adapters the configuration selects. Never logs secrets."""
    config = get_signature_config()
    logger.info(
        "signature_service_configured",
        environment=config.environment,
        persistence="postgresql" if config.database_url else "in_memory",
        email="http" if config.email_api_url else "stub",
        credential_verifier="http" if config.auth_api_url else "stub",
        token_ttl_hours=config.token_ttl_hours,
        signer_list_max_limit=config.signer_list_max_limit,
        development_secret=config.uses_development_secret,
    )


def run_startup() -> None:
    environment = configure_logging()
    logger.info("service_starting", environment=environment)
    log_configuration()


async def run_shutdown() -> None:
    await close_database_engine()
    logger.info("service_stopped")
