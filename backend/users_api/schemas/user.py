"""
Users API - User Schemas
Pydantic schemas for the User model and JWT claims
"""

from typing import Optional
from pydantic import BaseModel
from users_api.models.user import UserRole


class UserResponse(BaseModel):
    """User schema for API responses"""
    id: int
    username: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    role: UserRole

    class Config:
        from_attributes = True


class Claims(BaseModel):
    """
    Claims of a verified access token

    Only `username` is required; any other claim the issuer adds
    (sub, role, exp, iat...) is kept as an extra field.
    """
    username: str

    class Config:
        extra = "allow"
