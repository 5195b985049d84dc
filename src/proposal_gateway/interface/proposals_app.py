"""FastAPI application factory for the upstream proposal service."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from proposal_gateway.interface.dependencies import shutdown_proposals, startup_proposals
from proposal_gateway.interface.error_handlers import register_error_handlers
from proposal_gateway.interface.proposals_routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    await startup_proposals()
    yield
    await shutdown_proposals()


def create_proposals_app() -> FastAPI:
    """Build and wire the proposal service that consumes the gateway."""
    app = FastAPI(
        title="Business Proposals",
        version="1.0.0",
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
