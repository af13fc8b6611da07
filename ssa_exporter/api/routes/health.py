"""Health check endpoints."""

from fastapi import APIRouter, Depends

from ssa_exporter.api.deps import get_app_settings
from ssa_exporter.core.config import Settings
from ssa_exporter.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["system"])
def healthcheck(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Simple readiness probe; does not run ssacli."""

    return HealthResponse(status="ok", hostname=settings.hostname, ssacli=settings.ssacli_path)
