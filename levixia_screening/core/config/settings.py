# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Runtime settings for the screening service.

Everything here comes from environment variables (or a .env file):
unprefixed for the environment and logging, LLM_ for the text generator,
REPORT_ for the narrative report and API_ for the HTTP server. Scoring
thresholds are not settings; they are fixed in the engine.

Example:
    >>> from levixia_screening.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Text generator connection.

    The LiteLLM model string picks the provider, for example
    "ollama/qwen2.5:7b" for a local model or "gpt-4o-mini".

    Attributes:
        model: LiteLLM model string.
        api_base: Endpoint for self-hosted or proxied models.
        api_key: Provider key, sent with each request.
        request_timeout: Per-request timeout in seconds.
        max_retries: Provider-level retries.
    """

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        extra="ignore",
    )

    model: str = "ollama/qwen2.5:7b"
    api_base: str | None = None
    api_key: SecretStr | None = None
    request_timeout: float = 30.0
    max_retries: int = 1


class ReportSettings(BaseSettings):
    """Narrative report configuration.

    The narrative report is optional. When disabled, or when the text
    generator fails, the templated report is used.

    Attributes:
        narrative_enabled: Whether to request a generated narrative.
        timeout_seconds: Upper bound for the whole narrative request.
        language: Language code for disclaimers and report text.
        temperature: Sampling temperature for the narrative request.
        max_tokens: Maximum tokens for the narrative request.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPORT_",
        extra="ignore",
    )

    narrative_enabled: bool = False
    timeout_seconds: float = 20.0
    language: str = "en"
    temperature: float = 0.4
    max_tokens: int = 1500


class APISettings(BaseSettings):
    """Uvicorn options used by run_server.

    Attributes:
        host: Bind address.
        port: Listen port.
        reload: Restart on code changes (development only).
    """

    model_config = SettingsConfigDict(
        env_prefix="API_",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = 34000
    reload: bool = False


class Settings(BaseSettings):
    """Top-level settings; obtain through get_settings().

    Attributes:
        environment: Deployment environment.
        debug: Serve API docs and use console log rendering.
        log_level: Threshold for application logs.
        llm: Text generator connection.
        report: Narrative report options.
        api: HTTP server options.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    # Each group reads its own env prefix
    llm: LLMSettings = Field(default_factory=LLMSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)
    api: APISettings = Field(default_factory=APISettings)

    @property
    def is_development(self) -> bool:
        """True in the development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """True in the production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, read from the environment once."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached Settings so the next call re-reads the environment."""
    get_settings.cache_clear()
