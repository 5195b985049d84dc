"""Proposal workflow — create an enhanced draft and render its preview.

Depends only on the :class:`ProposalAssistant` and :class:`ProposalStore`
ports.  The assistant degrades on AI failures, so both operations succeed
whenever the store does.
"""

from __future__ import annotations

import logging

from proposal_gateway.domain.entities import ProposalRecord
from proposal_gateway.domain.exceptions import ProposalNotFoundError
from proposal_gateway.domain.ports.proposal_assistant import ProposalAssistant
from proposal_gateway.domain.ports.proposal_store import ProposalStore

logger = logging.getLogger(__name__)


class ProposalWorkflow:
    """Upstream use cases built on the gateway client."""

    def __init__(self, assistant: ProposalAssistant, store: ProposalStore) -> None:
        self._assistant = assistant
        self._store = store

    async def create_proposal(self, title: str, text: str) -> ProposalRecord:
        """Enhance *text* and persist it as a draft alongside the original."""
        enhanced = await self._assistant.enhance_text(text)
        record = await self._store.add(
            title=title, original_text=text, enhanced_text=enhanced
        )
        logger.info("Created proposal %d (%r)", record.id, record.title)
        return record

    async def render_preview(self, proposal_id: int) -> str:
        """Return HTML for the stored proposal; ``""`` if generation failed."""
        record = await self._store.get(proposal_id)
        if record is None:
            raise ProposalNotFoundError(f"Proposal {proposal_id} not found.")

        return await self._assistant.generate_html(
            {
                "title": record.title,
                "content": record.enhanced_text,
                "created_at": record.created_at.strftime("%Y-%m-%d"),
            }
        )
