"""FastAPI application entry point."""

from typing import Any

import structlog
from fastapi import APIRouter, FastAPI

from fallible.config import configure_logging, get_settings
from fallible.infrastructure.identity.routers import users_router

logger = structlog.get_logger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)

    @api_router.get("/")
    async def api_root() -> dict[str, Any]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    api_router.include_router(users_router)
    app.include_router(api_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    logger.info("app_created", environment=settings.ENVIRONMENT)
    return app


app = create_app()
