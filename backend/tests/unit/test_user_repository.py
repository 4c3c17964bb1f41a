"""
Unit tests for the SQLAlchemy User Repository and default user seeding
"""

import pytest
from sqlalchemy import select, func

from users_api.models.user import User, UserRole
from users_api.repositories.user_repository import SQLAlchemyUserRepository
from users_api.services.seed import seed_default_users, DEFAULT_USERS


@pytest.mark.asyncio
class TestSQLAlchemyUserRepository:
    """Test repository reads against SQLite"""

    async def test_find_all_in_id_order(self, seeded_db):
        """
        Test listing seeded users

        Given: Default users inserted
        When: Calling find_all
        Then: All users come back ordered by id
        """
        repo = SQLAlchemyUserRepository(seeded_db)

        users = await repo.find_all()

        assert [u.username for u in users] == ["admin", "johnd", "janed"]
        assert [u.id for u in users] == sorted(u.id for u in users)

    async def test_find_all_empty(self, db_session):
        assert await SQLAlchemyUserRepository(db_session).find_all() == []

    async def test_find_one_by_username(self, seeded_db):
        user = await SQLAlchemyUserRepository(seeded_db).find_one_by_username("janed")

        assert user is not None
        assert user.firstname == "Jane"
        assert user.lastname == "Doe"
        assert user.role == UserRole.USER

    async def test_find_one_by_username_missing(self, seeded_db):
        assert await SQLAlchemyUserRepository(seeded_db).find_one_by_username("nobody") is None

    async def test_find_one_by_username_is_exact(self, seeded_db):
        """Case folding is the gateway's job, the store matches exactly"""
        assert await SQLAlchemyUserRepository(seeded_db).find_one_by_username("JohnD") is None


@pytest.mark.asyncio
class TestSeedDefaultUsers:
    """Test startup seeding"""

    async def test_seed_empty_table(self, db_session):
        inserted = await seed_default_users(db_session)

        assert inserted == len(DEFAULT_USERS)
        admin = (await db_session.execute(
            select(User).where(User.username == "admin")
        )).scalar_one()
        assert admin.role == UserRole.ADMIN

    async def test_seed_is_idempotent(self, db_session):
        """
        Test seeding twice

        Given: Default users already present
        When: Seeding again
        Then: Nothing is inserted
        """
        await seed_default_users(db_session)

        assert await seed_default_users(db_session) == 0
        count = await db_session.scalar(select(func.count()).select_from(User))
        assert count == len(DEFAULT_USERS)

    async def test_seed_skips_non_empty_table(self, db_session):
        db_session.add(User(username="solo", firstname="Han", lastname="Solo"))
        await db_session.commit()

        assert await seed_default_users(db_session) == 0
        users = await SQLAlchemyUserRepository(db_session).find_all()
        assert [u.username for u in users] == ["solo"]
