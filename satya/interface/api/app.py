"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from satya.config import Settings
from satya.domain.service import StorageService
from satya.interface.api.routes import health, reports, uploads, votes
from satya.interface.error import register_error_handlers
from satya.util.di.container import create_container, setup_di
from satya.util.observability import instrument_app

API_PREFIX = "/api"


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create the API.

    Logfire must already be configured (``scripts/start_app.py`` does it).

    Args:
        container: DI container (production container if omitted)
        settings: Application settings (loaded from environment if omitted)
    """
    settings = settings or Settings()
    container = container or create_container(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        storage_service = await container.get(StorageService)
        await storage_service.ensure_bucket()
        logfire.info("API started", environment=settings.environment)
        try:
            yield
        finally:
            await container.close()

    app = FastAPI(
        title="SatyaMatrix API",
        description="Community reports on misleading content, with like/dislike votes",
        version="0.1.0",
        lifespan=lifespan,
    )
    instrument_app(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_origin_regex=".*" if settings.allow_any_origin else None,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=600,
    )

    setup_di(app, container)
    register_error_handlers(app)

    for router in (health.router, uploads.router, reports.router, votes.router):
        app.include_router(router, prefix=API_PREFIX)

    return app
