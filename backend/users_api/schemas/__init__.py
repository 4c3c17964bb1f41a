"""
Users API - Schemas Package
"""

from users_api.schemas.user import UserResponse, Claims
from users_api.schemas.health import HealthResponse

__all__ = [
    "UserResponse",
    "Claims",
    "HealthResponse",
]
