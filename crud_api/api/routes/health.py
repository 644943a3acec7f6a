"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reachable without the API key (listed in auth_bypass_prefixes by default)
"""

from fastapi import APIRouter, Depends, status

from crud_api import __version__
from crud_api.api.dependencies import get_user_store
from crud_api.core.repository_protocols import UserRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: UserRepository = Depends(get_user_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "crud-api",
        "version": __version__,
        "users": store.count(),
    }
