"""
Users API - JWT Authentication Middleware
Verifies bearer tokens on protected paths and attaches the claims
to request.state for the routers
"""

from typing import Callable, Optional
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from loguru import logger

from users_api.auth.security import decode_token
from users_api.core.config import settings
from users_api.schemas.user import Claims


def _unauthorized(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": detail},
        headers={"WWW-Authenticate": "Bearer"},
    )


class JWTAuthMiddleware(BaseHTTPMiddleware):
    """Middleware attaching verified JWT claims to protected requests"""

    def __init__(self, app, protected_prefix: Optional[str] = None):
        super().__init__(app)
        self.protected_prefix = (protected_prefix or settings.JWT_PROTECTED_PREFIX).rstrip("/")

    def is_protected(self, path: str) -> bool:
        """Prefix match on whole path segments: /users and /users/... but not /usersx"""
        return path == self.protected_prefix or path.startswith(self.protected_prefix + "/")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # CORS preflight carries no credentials
        if request.method == "OPTIONS" or not self.is_protected(request.url.path):
            return await call_next(request)

        auth_header = request.headers.get("Authorization", "")
        scheme, _, token = auth_header.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            logger.warning(f"🔒 Missing bearer token: {request.method} {request.url.path}")
            return _unauthorized("Missing or invalid authorization header")

        payload = decode_token(token.strip())
        if payload is None:
            logger.warning(f"🔒 Rejected token: {request.method} {request.url.path}")
            return _unauthorized("Could not validate credentials")

        try:
            claims = Claims(**payload)
        except ValidationError:
            logger.warning(f"🔒 Token without a string username claim: {request.url.path}")
            return _unauthorized("Could not validate credentials")

        request.state.claims = claims
        return await call_next(request)
