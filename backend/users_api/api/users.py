"""
Users API - Users Endpoints
Listing is open to any authenticated caller, single lookups only
to the owner of the record
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from users_api.api.deps import get_user_gateway
from users_api.auth.context import RequestContext, get_request_context
from users_api.schemas.user import UserResponse
from users_api.services.user_lookup import UserLookupGateway

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
async def list_users(
    gateway: UserLookupGateway = Depends(get_user_gateway)
):
    """List all users"""
    return await gateway.list_users()


@router.get("/{username}", response_model=UserResponse)
async def get_user(
    username: str,
    context: RequestContext = Depends(get_request_context),
    gateway: UserLookupGateway = Depends(get_user_gateway)
):
    """
    Get a user by username

    The path username must match the caller's token (case-insensitive).
    """
    user = await gateway.get_user_by_username(context, username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {username} not found"
        )
    return user
