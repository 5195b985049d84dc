"""Tests for the chat-completions and Gemini provider adapters."""

from __future__ import annotations

import json

import httpx
import pytest

from conftest import chat_completion, gemini_completion
from proposal_gateway.domain.entities import ProviderConfig, RequestShape
from proposal_gateway.domain.exceptions import MissingCredentialError, ProviderCallError
from proposal_gateway.infrastructure.chat_completions_adapter import (
    ChatCompletionsAdapter,
    build_messages,
)
from proposal_gateway.infrastructure.gemini_adapter import (
    GeminiAdapter,
    build_prompt,
    extract_text,
)


# ---------------------------------------------------------------------------
# Chat-style adapters
# ---------------------------------------------------------------------------


class TestBuildMessages:
    def test_system_and_user(self):
        assert build_messages("be brief", "hello") == [
            {"role": "system", "content": "be brief"},
            {"role": "user", "content": "hello"},
        ]

    @pytest.mark.parametrize("system", [None, ""])
    def test_system_turn_omitted_when_empty(self, system):
        assert build_messages(system, "hello") == [{"role": "user", "content": "hello"}]


class TestChatCompletionsAdapter:
    @pytest.mark.asyncio
    async def test_posts_chat_request_with_bearer_auth(
        self, provider_configs, http_client, recorder
    ):
        recorder.reply_json(chat_completion("Polished text."))
        adapter = ChatCompletionsAdapter(provider_configs["groq"], http_client)

        text = await adapter.complete("Improve this.", "raw text")

        assert text == "Polished text."
        assert len(recorder.requests) == 1
        request = recorder.requests[0]
        assert str(request.url) == "https://api.groq.com/openai/v1/chat/completions"
        assert request.headers["authorization"] == "Bearer groq-key"
        body = json.loads(request.content)
        assert body["model"] == "meta-llama/llama-4-scout-17b-16e-instruct"
        assert body["temperature"] == 0.7
        assert body["messages"] == [
            {"role": "system", "content": "Improve this."},
            {"role": "user", "content": "raw text"},
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("identifier", "url", "key"),
        [
            ("openai", "https://api.openai.com/v1/chat/completions", "openai-key"),
            ("deepseek", "https://api.deepseek.com/v1/chat/completions", "deepseek-key"),
        ],
    )
    async def test_vendors_differ_only_in_endpoint_and_credential(
        self, provider_configs, http_client, recorder, identifier, url, key
    ):
        adapter = ChatCompletionsAdapter(provider_configs[identifier], http_client)

        await adapter.complete(None, "hi")

        request = recorder.requests[0]
        assert str(request.url) == url
        assert request.headers["authorization"] == f"Bearer {key}"
        assert json.loads(request.content)["messages"] == [
            {"role": "user", "content": "hi"}
        ]

    @pytest.mark.asyncio
    async def test_non_2xx_carries_provider_payload(
        self, provider_configs, http_client, recorder
    ):
        recorder.reply_json({"error": {"message": "Invalid API Key"}}, status_code=401)
        adapter = ChatCompletionsAdapter(provider_configs["groq"], http_client)

        with pytest.raises(ProviderCallError) as exc_info:
            await adapter.complete("sys", "user")

        assert exc_info.value.status_code == 401
        assert "Invalid API Key" in json.dumps(exc_info.value.payload)
        assert len(recorder.requests) == 1  # no retries

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, provider_configs, http_client, recorder):
        def _boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        recorder.respond_with(_boom)
        adapter = ChatCompletionsAdapter(provider_configs["deepseek"], http_client)

        with pytest.raises(ProviderCallError, match="network error"):
            await adapter.complete("sys", "user")

    @pytest.mark.asyncio
    async def test_empty_choices_is_a_failure(self, provider_configs, http_client, recorder):
        body = chat_completion("x")
        body["choices"] = []
        recorder.reply_json(body)
        adapter = ChatCompletionsAdapter(provider_configs["openai"], http_client)

        with pytest.raises(ProviderCallError, match="no choices"):
            await adapter.complete("sys", "user")

    @pytest.mark.asyncio
    async def test_null_content_is_a_failure(self, provider_configs, http_client, recorder):
        recorder.reply_json(chat_completion(None))
        adapter = ChatCompletionsAdapter(provider_configs["openai"], http_client)

        with pytest.raises(ProviderCallError, match="no message content"):
            await adapter.complete("sys", "user")

    def test_requires_credential(self, http_client):
        config = ProviderConfig(
            identifier="groq",
            endpoint="https://api.groq.com/openai/v1",
            model="m",
            shape=RequestShape.CHAT,
        )
        with pytest.raises(MissingCredentialError):
            ChatCompletionsAdapter(config, http_client)

    @pytest.mark.asyncio
    async def test_close_releases_http_client(self, provider_configs, http_client):
        adapter = ChatCompletionsAdapter(provider_configs["groq"], http_client)

        await adapter.close()

        assert http_client.is_closed


# ---------------------------------------------------------------------------
# Single-prompt adapter (Gemini)
# ---------------------------------------------------------------------------


class TestGeminiHelpers:
    def test_prompt_joined_with_blank_line(self):
        assert build_prompt("system", "user") == "system\n\nuser"

    def test_prompt_without_user_part(self):
        assert build_prompt("system only", "") == "system only"

    def test_prompt_without_system_part(self):
        assert build_prompt(None, "user only") == "user only"

    def test_extract_text(self):
        assert extract_text(gemini_completion("hi there")) == "hi there"

    @pytest.mark.parametrize(
        "body",
        [{}, {"candidates": []}, {"candidates": [{"content": {"parts": []}}]}],
    )
    def test_extract_text_absent_is_empty_string(self, body):
        assert extract_text(body) == ""


class TestGeminiAdapter:
    @pytest.mark.asyncio
    async def test_sends_single_prompt_with_key_in_query(
        self, provider_configs, http_client, recorder
    ):
        recorder.reply_json(gemini_completion("<html></html>"))
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        text = await adapter.complete("Make HTML.", "")

        assert text == "<html></html>"
        request = recorder.requests[0]
        assert request.url.path == "/v1beta/models/gemini-pro:generateContent"
        assert request.url.params["key"] == "gemini-key"
        assert "authorization" not in request.headers
        assert json.loads(request.content) == {
            "contents": [{"parts": [{"text": "Make HTML."}]}]
        }

    @pytest.mark.asyncio
    async def test_missing_candidates_returns_empty_string(
        self, provider_configs, http_client, recorder
    ):
        recorder.reply_json({"promptFeedback": {"blockReason": "SAFETY"}})
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        assert await adapter.complete("sys", "user") == ""

    @pytest.mark.asyncio
    async def test_non_2xx_carries_provider_payload(
        self, provider_configs, http_client, recorder
    ):
        error = {"error": {"code": 400, "message": "API key not valid"}}
        recorder.reply_json(error, status_code=400)
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        with pytest.raises(ProviderCallError) as exc_info:
            await adapter.complete("sys", "user")

        assert exc_info.value.status_code == 400
        assert exc_info.value.payload == error

    @pytest.mark.asyncio
    async def test_non_json_body_is_a_failure(self, provider_configs, http_client, recorder):
        recorder.respond_with(lambda request: httpx.Response(200, text="<html>oops"))
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        with pytest.raises(ProviderCallError, match="not JSON"):
            await adapter.complete("sys", "user")

    @pytest.mark.asyncio
    async def test_non_object_body_is_a_failure(self, provider_configs, http_client, recorder):
        recorder.reply_json(["candidates"])
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        with pytest.raises(ProviderCallError, match="expected a JSON object") as exc_info:
            await adapter.complete("sys", "user")

        assert exc_info.value.payload == ["candidates"]

    @pytest.mark.asyncio
    async def test_close_leaves_shared_client_open(self, provider_configs, http_client):
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        await adapter.close()

        assert not http_client.is_closed

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, provider_configs, http_client, recorder):
        def _timeout(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        recorder.respond_with(_timeout)
        adapter = GeminiAdapter(provider_configs["gemini"], http_client)

        with pytest.raises(ProviderCallError, match="network error"):
            await adapter.complete("sys", "user")
