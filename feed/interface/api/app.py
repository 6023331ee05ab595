"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feed.config import Settings
from feed.interface.api.errors import register_error_handlers
from feed.interface.api.routes import health, posts
from feed.util.di.container import create_container, setup_di
from feed.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one built from mock providers.
    """
    settings = Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Feed API",
        description="Backend API for the social feed - posts, likes and comments",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
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

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
