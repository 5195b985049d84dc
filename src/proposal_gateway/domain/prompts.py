"""Fixed system prompts for the two gateway operations."""

from __future__ import annotations

ENHANCE_SYSTEM_PROMPT = (
    "Enhance this business proposal text to be more professional and compelling. "
    "Keep the original meaning but improve clarity and impact."
)

GENERATE_DOCUMENT_PROMPT = (
    "Generate a professional HTML template for a business proposal. "
    "Use this JSON data: "
)
