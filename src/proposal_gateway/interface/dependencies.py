"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from proposal_gateway.infrastructure.config import build_provider_configs, get_settings
from proposal_gateway.infrastructure.gateway_client import HttpGatewayClient
from proposal_gateway.infrastructure.memory_store import InMemoryProposalStore
from proposal_gateway.infrastructure.provider_registry import ProviderRegistry
from proposal_gateway.services.completion_gateway import CompletionGateway
from proposal_gateway.services.proposal_handlers import ProposalHandlers
from proposal_gateway.services.proposal_workflow import ProposalWorkflow

_http_client: httpx.AsyncClient | None = None
_registry: ProviderRegistry | None = None
_gateway: CompletionGateway | None = None

_proposals_http_client: httpx.AsyncClient | None = None
_workflow: ProposalWorkflow | None = None


# ── Gateway process ─────────────────────────────────────────────────────────


async def startup() -> None:
    """Build the provider registry and gateway; fail fast on a bad default provider."""
    global _http_client, _registry, _gateway  # noqa: PLW0603

    settings = get_settings()
    client = httpx.AsyncClient()
    registry = ProviderRegistry.from_configs(build_provider_configs(settings), client)
    try:
        registry.validate_default(settings.ai_provider)
    except Exception:
        await client.aclose()
        raise

    _http_client = client
    _registry = registry
    _gateway = CompletionGateway(registry, default_provider=settings.ai_provider)


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _registry, _gateway  # noqa: PLW0603

    if _registry:
        await _registry.close()
        _registry = None
    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _gateway = None


def get_handlers() -> ProposalHandlers:
    """Return request handlers bound to the process-wide gateway."""
    assert _gateway is not None, "startup() was not called"
    return ProposalHandlers(_gateway)


# ── Proposals process ───────────────────────────────────────────────────────


async def startup_proposals() -> None:
    """Wire the gateway client and record store for the upstream application."""
    global _proposals_http_client, _workflow  # noqa: PLW0603

    settings = get_settings()
    _proposals_http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.gateway_timeout))
    assistant = HttpGatewayClient(
        base_url=settings.gateway_url,
        client=_proposals_http_client,
        default_provider=settings.ai_provider,
    )
    _workflow = ProposalWorkflow(assistant=assistant, store=InMemoryProposalStore())


async def shutdown_proposals() -> None:
    """Release shared resources."""
    global _proposals_http_client, _workflow  # noqa: PLW0603

    if _proposals_http_client:
        await _proposals_http_client.aclose()
        _proposals_http_client = None
    _workflow = None


def get_workflow() -> ProposalWorkflow:
    """Return the process-wide proposal workflow."""
    assert _workflow is not None, "startup_proposals() was not called"
    return _workflow
