"""
Health API Router
Liveness check (no authentication)
"""
from fastapi import APIRouter

from ..models.health import HealthResponse, HealthStatus
from ..core.config import api_settings
from ..core.app_mode import get_app_mode_manager

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Service status"
)
async def health_check():
    return HealthResponse(
        status=HealthStatus.HEALTHY,
        version=api_settings.APP_VERSION,
        mode=get_app_mode_manager().mode.value
    )
