"""
Name: FastAPI Application Factory

Responsibilities:
  - Build the FastAPI application (metadata, middleware, routes, handlers)
  - Lifespan: validate settings, open/close the DB pool, build the container
  - Expose the public health check

Collaborators:
  - crosscutting.config: Settings / get_settings
  - infrastructure.db.pool: Database (opened here, never at import time)
  - container.Container: composition root stored in app.state.container
  - interfaces.api.http.build_router: /api routes
  - api.exception_handlers: structured error responses

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - REPOSITORY_BACKEND=memory skips the pool entirely

Notes:
  - Middleware order matters: RequestContext -> CORS -> routes
  - /health is outside the /api prefix and needs no token
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..container import Container
from ..crosscutting.config import Settings, get_settings
from ..crosscutting.logger import logger
from ..crosscutting.middleware import RequestContextMiddleware
from ..infrastructure.db.pool import Database
from ..interfaces.api.http import build_router
from .exception_handlers import register_exception_handlers


def _build_lifespan(settings: Settings, container: Optional[Container]):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db: Optional[Database] = None

        if container is None:
            if settings.repository_backend == "postgres":
                db = Database.from_settings(settings)
                await db.open()
                app.state.db = db
                app.state.container = Container.postgres(settings, db)
            else:
                app.state.container = Container.in_memory(settings)

        logger.info(
            "Finance API starting up",
            extra={
                "app_env": settings.app_env,
                "repository_backend": settings.repository_backend,
                "db_pool_min": settings.db_pool_min_size,
                "db_pool_max": settings.db_pool_max_size,
            },
        )
        try:
            yield
        finally:
            # R: Close pool on shutdown
            if db is not None:
                await db.close()
            logger.info("Finance API shutting down")

    return lifespan


def create_app(
    settings: Optional[Settings] = None, container: Optional[Container] = None
) -> FastAPI:
    """
    R: Build a fully wired app.

    Args:
        settings: defaults to get_settings() (raises ValidationError on bad env)
        container: pre-built container (tests); skips pool/container setup
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Finance API",
        version=__version__,
        lifespan=_build_lifespan(settings, container),
        openapi_tags=[
            {"name": "session", "description": "Login and token refresh"},
            {"name": "users", "description": "User management"},
            {"name": "accounts", "description": "Accounts shared by users"},
            {"name": "transactions", "description": "Transactions of an account"},
        ],
    )

    if container is not None:
        app.state.container = container

    # R: Middleware order (bottom = first to execute):
    # 1. CORSMiddleware - handles preflight
    # 2. RequestContextMiddleware - sets request_id
    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
    )

    app.include_router(build_router())
    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict:
        """R: Liveness probe (no DB round-trip)."""
        return {"status": "ok"}

    return app
