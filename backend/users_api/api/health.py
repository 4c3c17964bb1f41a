"""
Users API - Health Check API
"""

from fastapi import APIRouter

from users_api.schemas.health import HealthResponse
from users_api.services.user_lookup import UserLookupGateway

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Basic health check endpoint
    Always 200, touches no dependency
    """
    return UserLookupGateway.health_check()
