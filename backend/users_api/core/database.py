"""
Users API - Database
Async SQLAlchemy engine, session factory and request-scoped sessions
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from loguru import logger

from users_api.core.config import settings


class Base(DeclarativeBase):
    """Declarative base for all ORM models"""


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one session per request

    The session is closed when the request finishes.
    """
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    """Create all tables"""
    # Import models so they register on Base.metadata
    from users_api.models import user  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.debug("Database schema ready")


async def close_db() -> None:
    """Dispose the engine and its connection pool"""
    await engine.dispose()
