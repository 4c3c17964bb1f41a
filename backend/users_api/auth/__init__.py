"""
Users API - Auth Module
"""

from users_api.auth.security import create_access_token, decode_token
from users_api.auth.context import RequestContext, get_request_context

__all__ = [
    "create_access_token",
    "decode_token",
    "RequestContext",
    "get_request_context",
]
