"""
Users API - Security Utilities
JWT encoding/decoding with the shared HS secret
"""

from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from users_api.core.config import settings

DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create JWT access token

    Tokens are normally issued by the auth service; this is used by the
    developer token script and by tests.

    Args:
        data: Claims to encode (must include "username" to pass the middleware)
        expires_delta: Token lifetime, 24 hours when omitted

    Returns:
        Encoded JWT token
    """
    to_encode = data.copy()
    expire = datetime.utcnow() + (expires_delta or DEFAULT_TOKEN_LIFETIME)

    to_encode.update({
        "exp": expire,
        "iat": datetime.utcnow(),
    })

    return jwt.encode(
        to_encode,
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM
    )


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decode and verify JWT token (signature and expiry)

    Args:
        token: JWT token to decode

    Returns:
        Decoded token payload or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError:
        return None
