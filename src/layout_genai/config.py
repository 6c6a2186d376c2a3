from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Loads keys from process env, and also from a local .env file for convenience.
    model_config = SettingsConfigDict(env_prefix="", extra="ignore", env_file=".env", env_file_encoding="utf-8")

    # Keys
    openai_api_key: str | None = None
    gemini_api_key: str | None = None
    anthropic_api_key: str | None = None

    # Models (set via env vars as needed)
    openai_text_model: str = "gpt-4.1-mini"
    gemini_text_model: str = "gemini-2.0-flash"
    anthropic_text_model: str = "claude-3-7-sonnet-20250219"
    # Anthropic requires an explicit output cap on every request.
    anthropic_max_tokens: int = 4096

    default_provider: str = "openai"

    # Upper bound for the prompt-only generation mode.
    max_prompt_variants: int = 10

    log_level: str = "INFO"


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
