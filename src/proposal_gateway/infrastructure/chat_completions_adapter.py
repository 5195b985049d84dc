"""Chat-completions adapter — implements the LlmProvider port.

Serves every vendor that exposes an OpenAI-compatible
``/chat/completions`` endpoint with bearer-token auth (Groq, OpenAI,
DeepSeek).  Vendors differ only in base URL, model and credential.
"""

from __future__ import annotations

import logging

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from proposal_gateway.domain.entities import ProviderConfig
from proposal_gateway.domain.exceptions import MissingCredentialError, ProviderCallError

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7


def build_messages(system_prompt: str | None, user_prompt: str) -> list[dict[str, str]]:
    """Return the role-tagged message list; the system turn only when non-empty."""
    messages: list[dict[str, str]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": user_prompt})
    return messages


class ChatCompletionsAdapter:
    """Concrete ``LlmProvider`` for OpenAI-compatible chat-completion APIs."""

    def __init__(self, config: ProviderConfig, http_client: httpx.AsyncClient) -> None:
        if not config.api_key:
            raise MissingCredentialError(config.identifier)
        self._config = config
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.endpoint,
            max_retries=0,
            http_client=http_client,
        )

    @property
    def identifier(self) -> str:
        return self._config.identifier

    async def complete(self, system_prompt: str | None, user_prompt: str) -> str:
        """Send the prompts as chat messages and return the first choice's content."""
        provider = self._config.identifier
        logger.debug("Sending request to %s (%s)", provider, self._config.model)
        try:
            response = await self._client.chat.completions.create(
                model=self._config.model,
                messages=build_messages(system_prompt, user_prompt),  # type: ignore[arg-type]
                temperature=TEMPERATURE,
            )
        except APIStatusError as exc:
            payload = exc.body if exc.body is not None else exc.response.text
            logger.error("%s returned HTTP %d: %s", provider, exc.status_code, payload)
            raise ProviderCallError(
                provider,
                f"HTTP {exc.status_code}",
                status_code=exc.status_code,
                payload=payload,
            ) from exc
        except APIConnectionError as exc:
            raise ProviderCallError(provider, f"network error: {exc}") from exc
        except Exception as exc:
            raise ProviderCallError(provider, f"malformed response: {exc}") from exc

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ProviderCallError(
                provider, "response has no choices", payload=_dump(response)
            ) from exc

        if content is None:
            raise ProviderCallError(
                provider, "response has no message content", payload=_dump(response)
            )
        return content

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        await self._client.close()


def _dump(response: object) -> object:
    to_dict = getattr(response, "model_dump", None)
    if to_dict is None:
        return repr(response)
    try:
        return to_dict()
    except Exception:
        return repr(response)
