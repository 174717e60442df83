"""
Application factory for the login-app HTTP API.

uvicorn runs ``api:create_app`` in factory mode, so each server process
(and each test client) builds its own app over the shared service container.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings

from .middleware.errors import register_exception_handlers
from .routes import auth, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where the service starts and when it stops."""
    settings = get_settings()
    logger.info(
        "Starting %s %s (%s) on %s:%s",
        settings.app_name,
        settings.app_version,
        settings.environment,
        settings.host,
        settings.port,
    )
    yield
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Build the API: CORS, error mapping, health and auth routers.

    Interactive docs are only mounted when ``debug`` is on.
    """
    settings = get_settings()

    app = FastAPI(
        title="login-app",
        description="JWT authentication over an in-memory user store",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Browser clients on other origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Health is served both bare and under /api
    app.include_router(health.router, tags=["health"])
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth.router, prefix="/api/auth", tags=["auth"])

    return app
