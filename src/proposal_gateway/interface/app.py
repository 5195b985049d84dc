"""FastAPI application factory for the AI-provider gateway."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from proposal_gateway.interface.dependencies import shutdown, startup
from proposal_gateway.interface.error_handlers import register_error_handlers
from proposal_gateway.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the gateway application."""
    app = FastAPI(
        title="Proposal AI Gateway",
        version="1.0.0",
        description=(
            "Enhances business-proposal text and generates HTML proposal "
            "documents through a configurable set of LLM providers."
        ),
        lifespan=_lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
