"""Port: LLM provider — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class LlmProvider(Protocol):
    """Abstract contract for one vendor's completion API.

    Implementations are bound to their :class:`ProviderConfig` at
    construction and raise :class:`ProviderCallError` on any failure.
    """

    @property
    def identifier(self) -> str:
        """Provider identifier this adapter is registered under."""
        ...

    async def complete(self, system_prompt: str | None, user_prompt: str) -> str:
        """Send a system + user prompt pair and return the completion text."""
        ...

    async def close(self) -> None:
        """Release any client resources held by the adapter."""
        ...
