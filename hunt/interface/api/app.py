"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hunt.config import Settings
from hunt.interface.api.error import register_error_handlers
from hunt.interface.api.routes import auth, health, images, posts, users
from hunt.util.di.container import create_container, setup_di
from hunt.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to use; the production container by default

    Returns:
        Configured application
    """
    settings = Settings()

    # Instrument httpx for outbound storage requests
    instrument_httpx()

    app_instance = FastAPI(
        title="Hunt API",
        description="Backend API for sharing image posts, with comments and votes",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router, prefix="/api")
    app_instance.include_router(posts.router, prefix="/api")
    app_instance.include_router(users.router, prefix="/api")
    app_instance.include_router(images.router, prefix="/api")

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
