"""Gateway routes — thin controllers that delegate to the request handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from proposal_gateway.domain.exceptions import OperationFailedError
from proposal_gateway.interface.dependencies import get_handlers
from proposal_gateway.interface.schemas import (
    EnhanceTextRequest,
    EnhanceTextResponse,
    ErrorResponse,
    GenerateHtmlRequest,
    GenerateHtmlResponse,
)
from proposal_gateway.services.proposal_handlers import ProposalHandlers

router = APIRouter(prefix="/mcp")


@router.post(
    "/text-enhancement",
    response_model=EnhanceTextResponse,
    responses={500: {"model": ErrorResponse, "description": "Enhancement failed"}},
)
async def text_enhancement(
    body: EnhanceTextRequest,
    handlers: ProposalHandlers = Depends(get_handlers),
) -> EnhanceTextResponse:
    """Rewrite proposal text with the selected AI provider."""
    result = await handlers.enhance_text(body.text, body.provider)
    if not result.success:
        raise OperationFailedError(result.error or "", result.kind)  # type: ignore[arg-type]
    return EnhanceTextResponse(enhanced_text=result.value or "")


@router.post(
    "/generate-html",
    response_model=GenerateHtmlResponse,
    responses={500: {"model": ErrorResponse, "description": "Generation failed"}},
)
async def generate_html(
    body: GenerateHtmlRequest,
    handlers: ProposalHandlers = Depends(get_handlers),
) -> GenerateHtmlResponse:
    """Generate an HTML document for the supplied proposal data."""
    result = await handlers.generate_document(body.proposal, body.provider)
    if not result.success:
        raise OperationFailedError(result.error or "", result.kind)  # type: ignore[arg-type]
    return GenerateHtmlResponse(html=result.value or "")
