from fastapi import APIRouter

from lms.config import get_settings
from lms.feature_flags import get_feature_flags
from lms.infrastructure.common.schemas import AppSettingsResponse, SuccessResponse

router = APIRouter(tags=["service"])
settings = get_settings()


@router.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@router.get("/test")
async def test_api() -> SuccessResponse:
    return SuccessResponse(message="API is working")


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@router.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": "/docs",
    }


@router.get(f"{settings.API_V1_PREFIX}/settings")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Returns non-user-specific settings that affect application behavior.
    This is a public endpoint that doesn't require authentication.
    """
    return AppSettingsResponse(feature_flags=get_feature_flags())
