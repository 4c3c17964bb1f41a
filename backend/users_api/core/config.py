"""
Users API - Configuration
Settings are read from the environment (and an optional .env file)
"""

from typing import Optional, List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration settings"""

    # Application
    APP_NAME: str = "users-api"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"

    # Server
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8083

    # JWT (tokens are issued by the auth service, we only verify them)
    JWT_SECRET: str = "myfancysecret"
    JWT_ALGORITHM: str = "HS256"
    JWT_PROTECTED_PREFIX: str = "/users"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./users.db"
    DATABASE_ECHO: bool = False
    SEED_USERS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
