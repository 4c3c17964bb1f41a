from users_api.repositories.user_repository import UserRepository, SQLAlchemyUserRepository

__all__ = [
    "UserRepository",
    "SQLAlchemyUserRepository",
]
