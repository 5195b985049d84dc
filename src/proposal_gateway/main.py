from __future__ import annotations
import logging
import uvicorn
from proposal_gateway.infrastructure.config import Settings, get_settings


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


def main() -> None:
    """Start the gateway ASGI server."""
    settings = get_settings()
    _configure_logging(settings)
    uvicorn.run(
        "proposal_gateway.interface.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


def main_proposals() -> None:
    """Start the upstream proposal service."""
    settings = get_settings()
    _configure_logging(settings)
    uvicorn.run(
        "proposal_gateway.interface.proposals_app:create_proposals_app",
        factory=True,
        host=settings.host,
        port=settings.proposals_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
