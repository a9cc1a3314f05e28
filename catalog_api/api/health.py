"""Health check endpoints.

Provides service status and application metadata.
"""

from fastapi import APIRouter

from catalog_api.api.dependencies import SettingsDep
from catalog_api.api.schemas import AppInfoResponse, HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with a greeting and the current time.
    """
    return HealthResponse(message="Hello World!", status="healthy")


@router.get("/info", response_model=AppInfoResponse)
async def app_info(
    settings: SettingsDep,
) -> AppInfoResponse:
    """Get application metadata.

    Returns:
        Application name, version and environment.
    """
    return AppInfoResponse(
        name=settings.app_name,
        version=settings.api_version,
        environment=settings.environment,
    )
