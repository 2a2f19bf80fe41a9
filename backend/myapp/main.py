from contextlib import asynccontextmanager
from typing import Iterable, Optional

import uvicorn
from fastapi import FastAPI

from myapp.core.config import Settings, settings
from myapp.core.database import DatabaseManager, get_default_db_manager
from myapp.core.logger import get_logger
from myapp.api_router import build_api_router
from myapp.features.crud.domain.resource import ResourceDefinition
from myapp.features.entities.resources import RESOURCES
from myapp.shared.error_handlers import register_exception_handlers

logger = get_logger(__name__)


def create_app(
    app_settings: Settings = settings,
    resources: Iterable[ResourceDefinition] = RESOURCES,
    db_manager: Optional[DatabaseManager] = None,
    title: str = "myApp API"
) -> FastAPI:
    """Build an application serving the given resources from one database."""
    db = db_manager or get_default_db_manager()
    resources = list(resources)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handles application startup and shutdown events."""
        logger.info(f"{app_settings.app_name} startup...")

        if app_settings.database_create_tables:
            logger.info("Creating database tables...")
            await db.create_tables()

        yield

        logger.info(f"{app_settings.app_name} shutdown...")
        await db.close()

    app = FastAPI(
        title=title,
        description="CRUD resources " + ", ".join(r.display_name for r in resources),
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = app_settings
    app.state.db_manager = db

    register_exception_handlers(app)

    # Include the aggregated resource router under the API prefix
    app.include_router(
        build_api_router(resources, app_settings.app_name, app_settings.api_prefix),
        prefix=app_settings.api_prefix
    )

    @app.get("/", tags=["Health"])
    async def read_root():
        """Root endpoint for health checks."""
        return {"status": "ok"}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check endpoint that includes database reachability."""
        database_ok = await db.ping()
        return {
            "status": "ok" if database_ok else "degraded",
            "application": app_settings.app_name,
            "database": database_ok,
            "resources": [r.path for r in resources],
        }

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "myapp.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_level=settings.log_level.lower()
    )
