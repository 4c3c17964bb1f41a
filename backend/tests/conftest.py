"""
Users API - PyTest Configuration

Shared fixtures for:
- Database sessions with in-memory SQLite
- Seeded default users
- Repository doubles
- Token factories (valid, expired, invalid, missing username)
- HTTP client over the ASGI app
"""

import pytest
from typing import AsyncGenerator
from datetime import timedelta
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from users_api.core.database import Base, get_db
from users_api.auth.security import create_access_token
from users_api.models.user import User
from users_api.repositories.user_repository import UserRepository
from users_api.services.seed import seed_default_users
from users_api.main import app


# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ============================================================================
# CORE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Create test database session

    Each test gets a fresh database
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with TestingSessionLocal() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def seeded_db(db_session: AsyncSession) -> AsyncSession:
    """Database holding the default users (admin, johnd, janed)"""
    await seed_default_users(db_session)
    return db_session


@pytest.fixture
async def client(seeded_db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app, wired to the seeded test database"""
    async def _override_get_db():
        yield seeded_db

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


# ============================================================================
# REPOSITORY DOUBLES
# ============================================================================

@pytest.fixture
def alice() -> User:
    """Detached user record returned by repository doubles"""
    return User(id=1, username="alice", firstname="Alice", lastname="Liddell")


@pytest.fixture
def mock_repository() -> AsyncMock:
    """UserRepository double recording every call"""
    return AsyncMock(spec=UserRepository)


# ============================================================================
# TOKEN FACTORIES
# ============================================================================

@pytest.fixture
def johnd_token() -> str:
    """Valid token for johnd, expires in 24 hours (default)"""
    return create_access_token({"sub": "johnd", "username": "johnd", "role": "USER"})


@pytest.fixture
def admin_token() -> str:
    """Valid token for admin"""
    return create_access_token({"sub": "admin", "username": "admin", "role": "ADMIN"})


@pytest.fixture
def expired_token() -> str:
    """Token for johnd that expired 1 hour ago"""
    return create_access_token(
        {"sub": "johnd", "username": "johnd"},
        expires_delta=timedelta(hours=-1)
    )


@pytest.fixture
def invalid_token() -> str:
    """Malformed JWT with a bogus signature"""
    return "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.INVALID.SIGNATURE"


@pytest.fixture
def token_without_username() -> str:
    """Correctly signed token that lacks the username claim"""
    return create_access_token({"sub": "johnd"})
