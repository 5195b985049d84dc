"""Provider registry — maps provider identifiers to their adapters."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping

import httpx

from proposal_gateway.domain.entities import ProviderConfig, RequestShape
from proposal_gateway.domain.exceptions import MissingCredentialError, UnsupportedProviderError
from proposal_gateway.domain.ports.llm_provider import LlmProvider
from proposal_gateway.infrastructure.chat_completions_adapter import ChatCompletionsAdapter
from proposal_gateway.infrastructure.gemini_adapter import GeminiAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[ProviderConfig, httpx.AsyncClient], LlmProvider]

_ADAPTERS_BY_SHAPE: dict[RequestShape, AdapterFactory] = {
    RequestShape.CHAT: ChatCompletionsAdapter,
    RequestShape.SINGLE_PROMPT: GeminiAdapter,
}


class ProviderRegistry:
    """Exact-match lookup of provider adapters.

    Providers listed in *unconfigured* are known but have no credential;
    resolving one raises :class:`MissingCredentialError`.  Both failure
    modes are raised before any network activity.
    """

    def __init__(
        self,
        adapters: Mapping[str, LlmProvider],
        unconfigured: Iterable[str] = (),
    ) -> None:
        self._adapters = dict(adapters)
        self._unconfigured = frozenset(unconfigured).difference(self._adapters)

    @classmethod
    def from_configs(
        cls,
        configs: Mapping[str, ProviderConfig],
        http_client: httpx.AsyncClient,
    ) -> ProviderRegistry:
        """Build one adapter per credentialed provider in *configs*."""
        adapters: dict[str, LlmProvider] = {}
        unconfigured: list[str] = []
        for identifier, config in configs.items():
            if not config.api_key:
                unconfigured.append(identifier)
                continue
            adapters[identifier] = _ADAPTERS_BY_SHAPE[config.shape](config, http_client)

        if unconfigured:
            logger.info("Providers without credentials: %s", ", ".join(sorted(unconfigured)))
        return cls(adapters, unconfigured)

    @property
    def identifiers(self) -> tuple[str, ...]:
        """All known provider identifiers, configured or not."""
        return tuple(sorted(self._unconfigured.union(self._adapters)))

    def resolve(self, identifier: str) -> LlmProvider:
        """Return the adapter registered under *identifier*."""
        adapter = self._adapters.get(identifier)
        if adapter is not None:
            return adapter
        if identifier in self._unconfigured:
            raise MissingCredentialError(identifier)
        raise UnsupportedProviderError(identifier, self.identifiers)

    def validate_default(self, identifier: str) -> None:
        """Fail fast at startup if the default provider cannot be resolved."""
        self.resolve(identifier)

    async def close(self) -> None:
        """Close every registered adapter."""
        for adapter in self._adapters.values():
            await adapter.close()
