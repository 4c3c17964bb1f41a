"""
Users API - Request Context
Typed view of what the authentication middleware attached to a request
"""

from dataclasses import dataclass
from typing import Optional
from fastapi import Request

from users_api.schemas.user import Claims


@dataclass(frozen=True)
class RequestContext:
    """Per-request authentication data"""
    claims: Optional[Claims] = None


def get_request_context(request: Request) -> RequestContext:
    """
    FastAPI dependency building the RequestContext for a request

    Anything other than a Claims instance on request.state is treated
    as absent.
    """
    claims = getattr(request.state, "claims", None)
    if not isinstance(claims, Claims):
        claims = None
    return RequestContext(claims=claims)
