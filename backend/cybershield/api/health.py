"""Health check endpoint."""

from fastapi import APIRouter, Depends

from cybershield.core.config import Settings
from cybershield.core.deps import get_app_settings
from cybershield.core.timeutils import iso_timestamp
from cybershield.schemas.health import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Health check endpoint.

    WHY: Lets load balancers and uptime monitors verify the process is
    serving requests. Does not touch the contact store.
    """
    return HealthResponse(
        status="operational",
        service=settings.PROJECT_NAME,
        version=settings.VERSION,
        timestamp=iso_timestamp(),
    )
