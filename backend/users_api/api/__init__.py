from users_api.api import health, users

__all__ = [
    "health",
    "users",
]
