"""FastAPI application — main entry point."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI

from app.config import Settings, get_settings
from app.core.exceptions import setup_exception_handlers
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.infrastructure.database import Database
from app.infrastructure.ipinfo_api import IpInfoClient

# Import routers
from app.interfaces.api.auth import router as auth_router
from app.interfaces.api.ip_data import router as ip_data_router
from app.interfaces.api.users import router as users_router
from app.interfaces.api.geo import router as geo_router

logger = structlog.get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan — open the database once, close it on shutdown."""
        logger.info("Starting IP records backend...", env=settings.ENVIRONMENT)

        database = Database.from_settings(settings)
        # Create DB tables (no migrations tool; tables are created on boot)
        database.create_all()
        app.state.database = database
        app.state.ipinfo_client = IpInfoClient.from_settings(settings)

        yield

        database.dispose()
        logger.info("IP records backend stopped")

    app = FastAPI(
        title="IP Records Admin Backend",
        description="Collects and reviews per-user IP geolocation records",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings

    setup_middleware(app, settings)
    setup_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(ip_data_router)
    app.include_router(users_router)
    app.include_router(geo_router)

    @app.get("/")
    def root():
        return {"message": "Backend server is running!", "status": "success"}

    @app.get("/health")
    def health():
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()
