"""Proposal routes — create drafts and render their HTML preview."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from proposal_gateway.interface.dependencies import get_workflow
from proposal_gateway.interface.schemas import (
    CreateProposalRequest,
    ErrorResponse,
    ProposalResponse,
)
from proposal_gateway.services.proposal_workflow import ProposalWorkflow

router = APIRouter(prefix="/business-proposals")


@router.post("", response_model=ProposalResponse, status_code=201)
async def create_proposal(
    body: CreateProposalRequest,
    workflow: ProposalWorkflow = Depends(get_workflow),
) -> ProposalResponse:
    """Enhance the submitted text and store it as a draft proposal."""
    record = await workflow.create_proposal(body.title, body.text)
    return ProposalResponse.from_record(record)


@router.get(
    "/{proposal_id}/preview",
    response_class=HTMLResponse,
    responses={404: {"model": ErrorResponse, "description": "Proposal not found"}},
)
async def preview_proposal(
    proposal_id: int,
    workflow: ProposalWorkflow = Depends(get_workflow),
) -> HTMLResponse:
    """Render the stored proposal as an HTML document."""
    html = await workflow.render_preview(proposal_id)
    return HTMLResponse(content=html)
