"""FastAPI application entrypoint for the employee directory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from backend.api.errors import register_error_handlers
from backend.api.middleware.logging import LoggingMiddleware
from backend.api.routes import employees, health
from backend.core.config import settings
from backend.core.database import database_manager
from backend.core.exceptions import StoreUnavailableError
from backend.core.observability import configure_logging, setup_tracing

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Connect once on startup and close the connection on shutdown."""

    try:
        await database_manager.initialize()
    except StoreUnavailableError:
        # Requests retry the connection lazily; the liveness probe stays up.
        logger.warning("MongoDB unavailable at startup; will connect on first request")

    try:
        yield
    finally:
        await database_manager.close()


def create_app() -> FastAPI:
    configure_logging(settings)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    setup_tracing(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_error_handlers(app)

    # Routers
    app.include_router(employees.router, prefix=settings.API_PREFIX)
    app.include_router(health.router, prefix=settings.API_PREFIX)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus scrape endpoint."""

        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()
