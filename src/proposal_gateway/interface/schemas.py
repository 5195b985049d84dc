"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from proposal_gateway.domain.entities import ProposalRecord


# ── Gateway ─────────────────────────────────────────────────────────────────


class EnhanceTextRequest(BaseModel):
    """Request body for ``POST /mcp/text-enhancement``."""

    text: str
    provider: str | None = None


class EnhanceTextResponse(BaseModel):
    """Successful response from ``POST /mcp/text-enhancement``."""

    success: bool = True
    enhanced_text: str = Field(serialization_alias="enhancedText")


class GenerateHtmlRequest(BaseModel):
    """Request body for ``POST /mcp/generate-html``."""

    proposal: dict[str, Any]
    provider: str | None = None


class GenerateHtmlResponse(BaseModel):
    """Successful response from ``POST /mcp/generate-html``."""

    success: bool = True
    html: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    success: bool = False
    error: str


# ── Proposals ───────────────────────────────────────────────────────────────


class CreateProposalRequest(BaseModel):
    """Request body for ``POST /business-proposals``."""

    title: str
    text: str

    @field_validator("title", "text")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "must not be empty."
            raise ValueError(msg)
        return v


class ProposalResponse(BaseModel):
    """A stored proposal as returned by ``POST /business-proposals``."""

    id: int
    title: str
    original_text: str
    enhanced_text: str
    status: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: ProposalRecord) -> ProposalResponse:
        return cls(
            id=record.id,
            title=record.title,
            original_text=record.original_text,
            enhanced_text=record.enhanced_text,
            status=record.status.value,
            created_at=record.created_at,
        )
