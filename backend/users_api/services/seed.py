"""
Users API - Default Users
Fixture users inserted into an empty database on startup
"""

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from users_api.models.user import User, UserRole


DEFAULT_USERS = [
    {"username": "admin", "firstname": "Foo", "lastname": "Bar", "role": UserRole.ADMIN},
    {"username": "johnd", "firstname": "John", "lastname": "Doe", "role": UserRole.USER},
    {"username": "janed", "firstname": "Jane", "lastname": "Doe", "role": UserRole.USER},
]


async def seed_default_users(db: AsyncSession) -> int:
    """
    Insert DEFAULT_USERS when the users table is empty

    Returns:
        Number of users inserted (0 if the table already had rows)
    """
    count = await db.scalar(select(func.count()).select_from(User))
    if count:
        logger.debug(f"Users table has {count} rows, skipping seed")
        return 0

    db.add_all([User(**data) for data in DEFAULT_USERS])
    await db.commit()

    logger.info(f"🌱 Seeded {len(DEFAULT_USERS)} default users")
    return len(DEFAULT_USERS)
