"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Never rate limited, never touches user data beyond the record count
"""

from fastapi import APIRouter, Depends, status

from users_api.api.dependencies import get_registry
from users_api.config import get_settings
from users_api.core.user_registry import UserRegistry

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(registry: UserRegistry = Depends(get_registry)):
    """Basic liveness probe. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": "users-api",
        "version": settings.app_version,
        "users": len(registry),
    }
