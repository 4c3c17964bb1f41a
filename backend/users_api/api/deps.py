"""
Users API - Router Dependencies
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.core.database import get_db
from users_api.repositories.user_repository import SQLAlchemyUserRepository
from users_api.services.user_lookup import UserLookupGateway


def get_user_gateway(db: AsyncSession = Depends(get_db)) -> UserLookupGateway:
    """Gateway over a repository bound to the request's session"""
    return UserLookupGateway(SQLAlchemyUserRepository(db))
