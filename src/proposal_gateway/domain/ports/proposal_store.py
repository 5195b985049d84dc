"""Port: proposal store — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from proposal_gateway.domain.entities import ProposalRecord


class ProposalStore(Protocol):
    """Abstract contract for persisting proposal records."""

    async def add(
        self, title: str, original_text: str, enhanced_text: str
    ) -> ProposalRecord:
        """Persist a new draft proposal and return the stored record."""
        ...

    async def get(self, proposal_id: int) -> ProposalRecord | None:
        """Return the record for *proposal_id*, or ``None`` if absent."""
        ...
