"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quest.config import Settings
from quest.interface.api.routes import (
    achievements,
    auth,
    comments,
    feed,
    games,
    guides,
    health,
    library,
    platforms,
    reviews,
    tags,
    users,
    votes,
)
from quest.interface.error import register_error_handlers
from quest.persistence.database import StorageClient
from quest.util.di.container import create_container, setup_di
from quest.util.error import ConfigurationError
from quest.util.observability import instrument_fastapi

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ping storage at startup and release the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    # Resolving the client runs its connect() with retries
    await container.get(StorageClient)
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted

    Raises:
        ConfigurationError: If production runs with the default JWT secret
    """
    settings = Settings()
    if settings.is_production and settings.auth.jwt_secret == DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="GameQuest API",
        description="Backend API for GameQuest - game libraries, reviews, achievements and guides",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(games.router)
    app_instance.include_router(platforms.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(library.router)
    app_instance.include_router(reviews.router)
    app_instance.include_router(achievements.router)
    app_instance.include_router(guides.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(feed.router)

    return app_instance
