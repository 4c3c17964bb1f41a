"""
Users API - Main Application

FastAPI application with:
- JWT claims attached by middleware on /users
- Owner-only single user lookup
- Async SQLAlchemy user store
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from users_api.api import health, users
from users_api.core.config import settings
from users_api.core.database import init_db, close_db, AsyncSessionLocal
from users_api.core.exceptions import AccessDenied, MissingAuthContext
from users_api.core.logging import configure_logging
from users_api.middleware.jwt_auth import JWTAuthMiddleware
from users_api.services.seed import seed_default_users


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""

    # Startup
    logger.info(f"🚀 Starting {settings.APP_NAME}...")
    logger.info(f"📍 Environment: {settings.ENVIRONMENT}")
    logger.info(f"📍 Version: {settings.APP_VERSION}")

    try:
        await init_db()
        logger.info("✅ Database connected")

        if settings.SEED_USERS:
            async with AsyncSessionLocal() as db:
                await seed_default_users(db)
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"⏹️  Shutting down {settings.APP_NAME}...")
    await close_db()
    logger.info("👋 Application stopped")


async def access_denied_handler(request: Request, exc: AccessDenied):
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"detail": str(exc)},
    )


async def missing_auth_context_handler(request: Request, exc: MissingAuthContext):
    logger.error(f"❌ {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.opt(exception=exc).error(f"❌ Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error": str(exc) if settings.DEBUG else "An error occurred"
        }
    )


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="User lookup service behind JWT authentication",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.add_middleware(JWTAuthMiddleware)
    # Outermost, answers preflight before auth runs
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AccessDenied, access_denied_handler)
    app.add_exception_handler(MissingAuthContext, missing_auth_context_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(health.router)
    app.include_router(users.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "users_api.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
