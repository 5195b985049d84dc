"""In-memory proposal store — implements the ProposalStore port."""

from __future__ import annotations

import asyncio
import itertools
from datetime import datetime, timezone

from proposal_gateway.domain.entities import ProposalRecord, ProposalStatus


class InMemoryProposalStore:
    """Process-local ``ProposalStore`` with auto-incrementing ids."""

    def __init__(self) -> None:
        self._records: dict[int, ProposalRecord] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    async def add(
        self, title: str, original_text: str, enhanced_text: str
    ) -> ProposalRecord:
        async with self._lock:
            record = ProposalRecord(
                id=next(self._ids),
                title=title,
                original_text=original_text,
                enhanced_text=enhanced_text,
                created_at=datetime.now(timezone.utc),
                status=ProposalStatus.DRAFT,
            )
            self._records[record.id] = record
        return record

    async def get(self, proposal_id: int) -> ProposalRecord | None:
        return self._records.get(proposal_id)
