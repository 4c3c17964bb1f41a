"""
Middleware Module
"""

from .jwt_auth import JWTAuthMiddleware

__all__ = [
    "JWTAuthMiddleware",
]
