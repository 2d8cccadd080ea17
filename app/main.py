"""
FastAPI application setup for the street highlight API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from contextlib import asynccontextmanager

from app.config import get_settings
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.middleware import RequestContextMiddleware

# Get application settings
settings = get_settings()

configure_logging(
    level=settings.log_level.value,
    fmt=settings.log_format,
    log_file=settings.log_file,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    The service keeps no state between requests, so there is nothing to
    open or close beyond logging the transitions.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if not settings.places.api_key:
        logger.warning("PLACES_API_KEY is not set; streets will be built without places")
    yield
    logger.info("Shutting down application")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from app.api.streets_endpoints import router as streets_router
    from app.api.health_endpoints import router as health_router
    app.include_router(streets_router)
    app.include_router(health_router)

    @app.get("/")
    async def root():
        """Root endpoint for basic liveness."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running"
        }

    return app


# Create application instance
app = create_app()
