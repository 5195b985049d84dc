"""Gemini adapter — implements the LlmProvider port over the REST API.

Gemini takes one flat prompt rather than role-tagged turns, authenticates
with a ``key`` query parameter and answers with nested content parts.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from proposal_gateway.domain.entities import ProviderConfig
from proposal_gateway.domain.exceptions import MissingCredentialError, ProviderCallError

logger = logging.getLogger(__name__)


def build_prompt(system_prompt: str | None, user_prompt: str) -> str:
    """Join the prompts with a blank line when both are present."""
    if system_prompt and user_prompt:
        return f"{system_prompt}\n\n{user_prompt}"
    return system_prompt or user_prompt


def extract_text(data: dict[str, Any]) -> str:
    """Return ``candidates[0].content.parts[0].text`` or ``""`` when absent."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return ""
    return text if isinstance(text, str) else ""


class GeminiAdapter:
    """Concrete ``LlmProvider`` backed by ``models/{model}:generateContent``."""

    def __init__(self, config: ProviderConfig, http_client: httpx.AsyncClient) -> None:
        if not config.api_key:
            raise MissingCredentialError(config.identifier)
        self._config = config
        self._client = http_client
        self._url = f"{config.endpoint.rstrip('/')}/models/{config.model}:generateContent"

    @property
    def identifier(self) -> str:
        return self._config.identifier

    async def complete(self, system_prompt: str | None, user_prompt: str) -> str:
        """POST the joined prompt and extract the first candidate's text."""
        provider = self._config.identifier
        body = {"contents": [{"parts": [{"text": build_prompt(system_prompt, user_prompt)}]}]}
        logger.debug("Sending request to %s (%s)", provider, self._config.model)

        try:
            resp = await self._client.post(
                self._url,
                params={"key": self._config.api_key or ""},
                json=body,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise ProviderCallError(provider, f"network error: {exc}") from exc

        if not resp.is_success:
            payload = _payload(resp)
            logger.error("%s returned HTTP %d: %s", provider, resp.status_code, payload)
            raise ProviderCallError(
                provider,
                f"HTTP {resp.status_code}",
                status_code=resp.status_code,
                payload=payload,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderCallError(
                provider,
                "malformed response: body is not JSON",
                status_code=resp.status_code,
                payload=resp.text,
            ) from exc

        if not isinstance(data, dict):
            raise ProviderCallError(
                provider,
                "malformed response: expected a JSON object",
                status_code=resp.status_code,
                payload=data,
            )
        return extract_text(data)

    async def close(self) -> None:
        """Nothing to release; the HTTP client is owned by the caller."""


def _payload(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text
