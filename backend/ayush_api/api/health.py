"""Health check endpoint."""

from datetime import UTC, datetime

from fastapi import APIRouter

from ayush_api.api.deps import SettingsDep
from ayush_api.api.responses import success_response
from ayush_api.schemas import ApiResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=ApiResponse, response_model_exclude_none=True)
def health_check(settings: SettingsDep) -> ApiResponse:
    """Liveness probe."""
    return success_response(
        {
            "status": "OK",
            "service": settings.app_name,
            "version": settings.version,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        message="AYUSH Healthcare API is running",
    )
