"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devnovate.config import Settings
from devnovate.interface.api.routes import (
    admin,
    auth,
    blogs,
    comments,
    health,
    likes,
    search,
)
from devnovate.interface.error import register_exception_handlers
from devnovate.util.di.container import (
    close_container_on_shutdown,
    create_container,
    setup_di,
)
from devnovate.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one (tests)
    """
    settings = Settings()

    # Outbound notification webhooks
    instrument_httpx()

    app_instance = FastAPI(
        title="Devnovate API",
        description="Backend API for Devnovate - a moderated blogging platform for developers",
        version=settings.version,
        lifespan=close_container_on_shutdown,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(likes.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(admin.router)
    app_instance.include_router(search.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
