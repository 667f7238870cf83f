"""
DevConnector API - developer social network.

FastAPI application: accounts, developer profiles, and a posts feed.
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded

from devconnector.config import settings, validate_security_settings
from devconnector.database import Database, init_db
from devconnector.exception_handlers import setup_exception_handlers
from devconnector.logging import setup_logging
from devconnector.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from devconnector.middleware.request_logging import log_requests
from devconnector.routers.auth import router as auth_router
from devconnector.routers.posts import router as posts_router
from devconnector.routers.profile import router as profile_router
from devconnector.routers.users import router as users_router

# Import models to register them with Base.metadata
from devconnector import models  # noqa: F401

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    validate_security_settings()
    database: Database = app.state.database
    if settings.run_migrations:
        await init_db(database.url)
    logger.info("api_started", environment=settings.environment)
    yield
    await database.dispose()


def create_app(database: Database | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    ``database`` defaults to one built from ``settings.database_url``.
    """
    setup_logging()

    app = FastAPI(
        title="DevConnector API",
        description="Social network backend for developers",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database or Database(settings.database_url)

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    setup_exception_handlers(app)

    app.include_router(users_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(posts_router)

    @app.get("/", response_class=PlainTextResponse, tags=["System"])
    async def root() -> str:
        return "API Running"

    return app


app = create_app()
