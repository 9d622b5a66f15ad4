"""
FastAPI application with assembled routers.

Serves job status and result lookups for callers polling optimization jobs.

Dependencies: fastapi, optimizer_jobs.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from optimizer_jobs.configs import get_settings
from optimizer_jobs.observability.logger import configure_logging
from .routers import health_router, jobs_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Application startup: environment={settings.environment}")

    yield

    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Optimizer Jobs API",
        description="Status and result lookups for asynchronous optimization jobs",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(jobs_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "optimizer_jobs.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
