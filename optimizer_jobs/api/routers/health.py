"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: optimizer_jobs.boundary.store
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from optimizer_jobs.api.deps import get_store
from optimizer_jobs.boundary.store import ResultStore


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=HealthResponse)
def health_check_store(store: ResultStore = Depends(get_store)):
    """Result store health check."""
    if store.ping():
        return HealthResponse(status="healthy", message="Result store reachable")
    return JSONResponse(
        status_code=503,
        content=HealthResponse(status="unhealthy", message="Result store unreachable").model_dump(),
    )
