"""
Users API - User Model
"""

from sqlalchemy import Column, Integer, String, Enum
import enum

from users_api.core.database import Base


class UserRole(str, enum.Enum):
    """User roles"""
    ADMIN = "ADMIN"
    USER = "USER"


class User(Base):
    """User record looked up by username"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    firstname = Column(String(255))
    lastname = Column(String(255))
    role = Column(Enum(UserRole), default=UserRole.USER, nullable=False)

    def __repr__(self):
        return f"<User {self.username} ({self.role})>"
