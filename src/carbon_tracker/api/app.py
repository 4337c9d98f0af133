"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from carbon_tracker.api.account import router as account_router
from carbon_tracker.api.entries import router as entries_router
from carbon_tracker.api.summaries import router as summaries_router
from carbon_tracker.app_logging import configure_logging
from carbon_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        identity = await app.state.container.session_service.initialize()
        logger.info("Session started as %s", identity.kind)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(account_router)
    app.include_router(entries_router)
    app.include_router(summaries_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
