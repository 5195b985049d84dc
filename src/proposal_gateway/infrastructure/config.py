"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from proposal_gateway.domain.entities import ProviderConfig, RequestShape


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ai_provider: str = "groq"

    groq_api_key: SecretStr | None = None
    groq_model: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    groq_base_url: str = "https://api.groq.com/openai/v1"

    openai_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "CHATGPT_API_KEY"),
    )
    openai_model: str = "gpt-4"
    openai_base_url: str = "https://api.openai.com/v1"

    deepseek_api_key: SecretStr | None = None
    deepseek_model: str = "deepseek-chat"
    deepseek_base_url: str = "https://api.deepseek.com/v1"

    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-pro"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    gateway_url: str = "http://localhost:3001"
    gateway_timeout: float = 30.0

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3001
    proposals_port: int = 8000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()


def _secret(value: SecretStr | None) -> str | None:
    if value is None:
        return None
    return value.get_secret_value() or None


def build_provider_configs(settings: Settings) -> dict[str, ProviderConfig]:
    """Translate *settings* into the immutable per-provider config table."""
    return {
        "groq": ProviderConfig(
            identifier="groq",
            endpoint=settings.groq_base_url,
            model=settings.groq_model,
            shape=RequestShape.CHAT,
            api_key=_secret(settings.groq_api_key),
        ),
        "openai": ProviderConfig(
            identifier="openai",
            endpoint=settings.openai_base_url,
            model=settings.openai_model,
            shape=RequestShape.CHAT,
            api_key=_secret(settings.openai_api_key),
        ),
        "deepseek": ProviderConfig(
            identifier="deepseek",
            endpoint=settings.deepseek_base_url,
            model=settings.deepseek_model,
            shape=RequestShape.CHAT,
            api_key=_secret(settings.deepseek_api_key),
        ),
        "gemini": ProviderConfig(
            identifier="gemini",
            endpoint=settings.gemini_base_url,
            model=settings.gemini_model,
            shape=RequestShape.SINGLE_PROMPT,
            api_key=_secret(settings.gemini_api_key),
        ),
    }
