"""
Users API - Database Models
"""

from users_api.models.user import User, UserRole

__all__ = [
    "User",
    "UserRole",
]
