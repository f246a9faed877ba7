"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alumni.config import Settings
from alumni.interface.api.routes import health, surveys, tags, threads
from alumni.util.di.container import create_container, setup_di
from alumni.util.observability import instrument_fastapi, instrument_httpx


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function: start_app.py
    does it in production and conftest.py in tests.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Alumni Connect API",
        description="Backend API for Alumni Connect - discussion threads with voting and alumni surveys",
        version="0.1.0",
    )

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
            "Content-Type",
            "Accept",
            "Origin",
            "X-Alumni-Id",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(threads.router)
    app_instance.include_router(surveys.router)
    app_instance.include_router(tags.router)

    return app_instance
