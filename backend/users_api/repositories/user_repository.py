"""
Users API - User Repository
Data access for User records
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from users_api.models.user import User


class UserRepository(ABC):
    """Read contract the user lookup gateway depends on"""

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every user, in a stable order"""

    @abstractmethod
    async def find_one_by_username(self, username: str) -> Optional[User]:
        """Return the user with exactly this username, or None"""


class SQLAlchemyUserRepository(UserRepository):
    """UserRepository backed by an async SQLAlchemy session"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def find_one_by_username(self, username: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()
