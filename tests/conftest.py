"""Shared fixtures for the proposal gateway tests.

Outbound HTTP never leaves the process: every adapter is wired to an
``httpx.AsyncClient`` backed by ``httpx.MockTransport`` whose handler
records each request, so tests can assert on what was (or was not) sent.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

import httpx
import pytest

from proposal_gateway.domain.entities import ProviderConfig, RequestShape
from proposal_gateway.infrastructure.provider_registry import ProviderRegistry
from proposal_gateway.services.completion_gateway import CompletionGateway

Responder = Callable[[httpx.Request], httpx.Response]


def chat_completion(content: str | None) -> dict[str, Any]:
    """Minimal OpenAI-compatible chat-completion body."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1_700_000_000,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def gemini_completion(text: str) -> dict[str, Any]:
    """Minimal Gemini ``generateContent`` body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RequestRecorder:
    """MockTransport handler that records requests and replies via a responder."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responder: Responder = lambda request: httpx.Response(
            200, json=chat_completion("ok")
        )

    def respond_with(self, responder: Responder) -> None:
        self._responder = responder

    def reply_json(self, body: Any, status_code: int = 200) -> None:
        self._responder = lambda request: httpx.Response(status_code, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)


@pytest.fixture
def recorder() -> RequestRecorder:
    return RequestRecorder()


@pytest.fixture
def http_client(recorder: RequestRecorder) -> httpx.AsyncClient:
    # MockTransport holds no sockets, so the client needs no closing.
    return httpx.AsyncClient(transport=httpx.MockTransport(recorder))


@pytest.fixture
def provider_configs() -> dict[str, ProviderConfig]:
    """All four providers with credentials."""
    return {
        "groq": ProviderConfig(
            identifier="groq",
            endpoint="https://api.groq.com/openai/v1",
            model="meta-llama/llama-4-scout-17b-16e-instruct",
            shape=RequestShape.CHAT,
            api_key="groq-key",
        ),
        "openai": ProviderConfig(
            identifier="openai",
            endpoint="https://api.openai.com/v1",
            model="gpt-4",
            shape=RequestShape.CHAT,
            api_key="openai-key",
        ),
        "deepseek": ProviderConfig(
            identifier="deepseek",
            endpoint="https://api.deepseek.com/v1",
            model="deepseek-chat",
            shape=RequestShape.CHAT,
            api_key="deepseek-key",
        ),
        "gemini": ProviderConfig(
            identifier="gemini",
            endpoint="https://generativelanguage.googleapis.com/v1beta",
            model="gemini-pro",
            shape=RequestShape.SINGLE_PROMPT,
            api_key="gemini-key",
        ),
    }


@pytest.fixture
def registry(provider_configs, http_client) -> ProviderRegistry:
    return ProviderRegistry.from_configs(provider_configs, http_client)


@pytest.fixture
def gateway(registry) -> CompletionGateway:
    return CompletionGateway(registry, default_provider="groq")


class CannedAssistant:
    """ProposalAssistant test double returning fixed values, no network.

    With no ``enhanced`` value it behaves like a degraded client and hands
    the input text back unchanged.
    """

    def __init__(self, enhanced: str | None = None, html: str = "<html>doc</html>") -> None:
        self._enhanced = enhanced
        self._html = html
        self.html_requests: list[dict[str, Any]] = []

    async def enhance_text(self, text: str, provider: str | None = None) -> str:
        return self._enhanced if self._enhanced is not None else text

    async def generate_html(
        self, data: Mapping[str, Any], provider: str | None = None
    ) -> str:
        self.html_requests.append(dict(data))
        return self._html
