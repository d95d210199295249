"""
Health Check Router - TalentFlow
talentflow/routers/health.py

Liveness plus a real reachability check of the storage backend.
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from talentflow.config import settings
from talentflow.core.dependencies import get_backend
from talentflow.repositories.backends import StorageBackend

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


#  Dependency Health Checks


def check_storage(backend: StorageBackend) -> str:
    """Check the configured storage backend."""
    if backend.ping():
        return f"healthy (backend: {backend.name})"
    return f"unhealthy: {backend.name} backend unreachable"


#  Routes


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "All dependencies healthy"},
        503: {"description": "Storage backend unreachable"},
    },
    summary="Health check",
)
async def health_check(backend: StorageBackend = Depends(get_backend)):
    dependencies = {"storage": check_storage(backend)}
    all_healthy = all(v.startswith("healthy") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )

    if all_healthy:
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
