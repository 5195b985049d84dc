"""HTTP client for the gateway — implements the ProposalAssistant port.

Failures degrade instead of raising: ``enhance_text`` hands back the
original text and ``generate_html`` returns an empty string, so an AI
provider outage never blocks proposal creation or preview rendering.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

logger = logging.getLogger(__name__)

ENHANCE_PATH = "/mcp/text-enhancement"
GENERATE_PATH = "/mcp/generate-html"


class HttpGatewayClient:
    """Concrete ``ProposalAssistant`` that talks to the gateway over JSON/HTTP."""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient,
        default_provider: str | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._default_provider = default_provider

    async def enhance_text(self, text: str, provider: str | None = None) -> str:
        """Return the enhanced text, or *text* unchanged on any failure."""
        payload = {"text": text, "provider": provider or self._default_provider}
        enhanced = await self._post_for_field(ENHANCE_PATH, payload, "enhancedText")
        if enhanced is None:
            logger.warning("Text enhancement unavailable — keeping original text")
            return text
        return enhanced

    async def generate_html(
        self, data: Mapping[str, Any], provider: str | None = None
    ) -> str:
        """Return generated markup, or ``""`` on any failure."""
        try:
            proposal = _jsonable(data)
        except (TypeError, ValueError) as exc:
            logger.warning("Proposal data is not JSON-encodable: %s", exc)
            return ""

        payload = {"proposal": proposal, "provider": provider or self._default_provider}
        html = await self._post_for_field(GENERATE_PATH, payload, "html")
        if html is None:
            logger.warning("HTML generation unavailable — returning empty document")
            return ""
        return html

    async def _post_for_field(
        self, path: str, payload: dict[str, Any], field: str
    ) -> str | None:
        """POST *payload* and return ``body[field]`` if it is a string."""
        if payload.get("provider") is None:
            payload.pop("provider")
        url = f"{self._base_url}{path}"
        try:
            resp = await self._client.post(url, json=payload)
        except httpx.HTTPError as exc:
            logger.warning("Gateway call to %s failed: %s", url, exc)
            return None

        if not resp.is_success:
            logger.warning("Gateway returned HTTP %d for %s", resp.status_code, url)
            return None

        try:
            body = resp.json()
        except ValueError:
            logger.warning("Gateway returned a non-JSON body for %s", url)
            return None

        value = body.get(field) if isinstance(body, dict) else None
        return value if isinstance(value, str) else None


def _jsonable(data: Mapping[str, Any]) -> dict[str, Any]:
    """Plain-JSON copy of *data*; dates and other scalars become strings."""
    return json.loads(json.dumps(dict(data), default=str))
