"""
Users API - Core Module
"""

from users_api.core.config import settings
from users_api.core.database import get_db, init_db, close_db
from users_api.core.exceptions import UsersAPIError, MissingAuthContext, AccessDenied

__all__ = [
    "settings",
    "get_db",
    "init_db",
    "close_db",
    "UsersAPIError",
    "MissingAuthContext",
    "AccessDenied",
]
