"""Port: proposal assistant — the capability the upstream application consumes."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ProposalAssistant(Protocol):
    """Produce enhanced proposal text and document markup.

    Implementations degrade instead of raising: ``enhance_text`` returns its
    input unchanged and ``generate_html`` returns ``""`` when the AI call fails.
    """

    async def enhance_text(self, text: str, provider: str | None = None) -> str:
        ...

    async def generate_html(
        self, data: Mapping[str, Any], provider: str | None = None
    ) -> str:
        ...
