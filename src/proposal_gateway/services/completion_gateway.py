"""Completion gateway — the single entry point for provider calls.

Resolves the provider through the :class:`ProviderRegistry`, delegates to
its adapter and wraps the outcome in a :class:`CompletionResult`.  The
gateway holds no per-request state.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from proposal_gateway.domain.entities import CompletionRequest, CompletionResult, FailureKind
from proposal_gateway.domain.exceptions import ConfigurationError, ProviderCallError
from proposal_gateway.infrastructure.provider_registry import ProviderRegistry

logger = logging.getLogger(__name__)


class CompletionGateway:
    """Dispatch provider-agnostic completion requests.

    Parameters
    ----------
    registry:
        Lookup of provider adapters.
    default_provider:
        Identifier used when a request does not name a provider.
    """

    def __init__(self, registry: ProviderRegistry, default_provider: str) -> None:
        self._registry = registry
        self._default_provider = default_provider

    @property
    def default_provider(self) -> str:
        return self._default_provider

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        """Run *request* against its provider and return text or a typed failure."""
        provider = request.provider or self._default_provider

        try:
            adapter = self._registry.resolve(provider)
            text = await adapter.complete(request.system_prompt, request.user_prompt)
        except ConfigurationError as exc:
            result = CompletionResult.failure(FailureKind.CONFIGURATION, str(exc))
        except ProviderCallError as exc:
            result = CompletionResult.failure(
                FailureKind.PROVIDER_CALL, _provider_message(exc)
            )
        else:
            result = CompletionResult.success(text)

        _trace(provider, request, result)
        return result


def _provider_message(exc: ProviderCallError) -> str:
    if exc.payload is None:
        return str(exc)
    if isinstance(exc.payload, str):
        return exc.payload
    return json.dumps(exc.payload, default=str)


def _trace(provider: str, request: CompletionRequest, result: CompletionResult) -> None:
    outcome = "success" if result.ok else result.kind.value  # type: ignore[union-attr]
    fields: dict[str, Any] = {
        "provider": provider,
        "system_prompt": request.system_prompt,
        "user_prompt": request.user_prompt,
        "outcome": outcome,
    }
    if result.ok:
        logger.info("completion %s", json.dumps(fields, ensure_ascii=False))
    else:
        fields["provider_message"] = result.provider_message
        logger.warning("completion %s", json.dumps(fields, ensure_ascii=False))
