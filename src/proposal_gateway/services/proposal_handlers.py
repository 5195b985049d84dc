"""The two fixed gateway operations: enhance text and generate document."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping

from proposal_gateway.domain.entities import CompletionRequest, FailureKind
from proposal_gateway.domain.prompts import ENHANCE_SYSTEM_PROMPT, GENERATE_DOCUMENT_PROMPT
from proposal_gateway.services.completion_gateway import CompletionGateway

logger = logging.getLogger(__name__)

ENHANCE_ERROR = "Failed to enhance text"
GENERATE_ERROR = "Failed to generate HTML"


@dataclass(frozen=True, slots=True)
class HandlerResult:
    """Caller-facing outcome of a handler; never carries provider payloads."""

    field: str
    value: str | None = None
    error: str | None = None
    kind: FailureKind | None = None

    @property
    def success(self) -> bool:
        return self.kind is None


def serialize_proposal(proposal: Mapping[str, Any]) -> str:
    """Deterministic JSON for *proposal*; keys are emitted in sorted order."""
    return json.dumps(proposal, sort_keys=True, ensure_ascii=False, default=str)


def document_prompt(proposal: Mapping[str, Any]) -> str:
    return GENERATE_DOCUMENT_PROMPT + serialize_proposal(proposal)


class ProposalHandlers:
    """Stateless operations layered on the :class:`CompletionGateway`."""

    def __init__(self, gateway: CompletionGateway) -> None:
        self._gateway = gateway

    async def enhance_text(self, text: str, provider: str | None = None) -> HandlerResult:
        """Rewrite *text* for clarity and professionalism."""
        result = await self._gateway.complete(
            CompletionRequest(
                user_prompt=text,
                system_prompt=ENHANCE_SYSTEM_PROMPT,
                provider=provider,
            )
        )
        if not result.ok:
            logger.error(
                "Text enhancement failed (%s): %s", result.kind, result.provider_message
            )
            return HandlerResult(field="enhancedText", error=ENHANCE_ERROR, kind=result.kind)
        return HandlerResult(field="enhancedText", value=result.text)

    async def generate_document(
        self, proposal: Mapping[str, Any], provider: str | None = None
    ) -> HandlerResult:
        """Produce HTML markup for *proposal*; the data rides in the system prompt."""
        result = await self._gateway.complete(
            CompletionRequest(
                user_prompt="",
                system_prompt=document_prompt(proposal),
                provider=provider,
            )
        )
        if not result.ok:
            logger.error(
                "HTML generation failed (%s): %s", result.kind, result.provider_message
            )
            return HandlerResult(field="html", error=GENERATE_ERROR, kind=result.kind)
        return HandlerResult(field="html", value=result.text)
