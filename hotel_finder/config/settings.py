"""Environment configuration and validation.

Settings are loaded from environment variables (optionally via a local `.env` file). The LLM
credential is optional at startup: without it every search reports a configuration failure instead
of the process refusing to boot.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str | None = Field(default=None, alias="TELEGRAM_BOT_TOKEN")
    hotels_csv_path: str = Field(default="data/hotels.csv", alias="HOTELS_CSV_PATH")

    llm_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "OPENAI_API_KEY"),
    )
    llm_model: str = Field(default="gpt-3.5-turbo", alias="LLM_MODEL")
    llm_api_base: str = Field(default="https://api.openai.com/v1", alias="LLM_API_BASE")
    llm_timeout_s: float = Field(default=30.0, alias="LLM_TIMEOUT_S")
    llm_max_attempts: int = Field(default=2, alias="LLM_MAX_ATTEMPTS")

    debug_llm: bool = Field(default=False, alias="DEBUG_LLM")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("llm_timeout_s")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Reject non-positive timeouts; an unbounded LLM call would stall a request forever."""

        if value <= 0:
            raise ValueError("LLM_TIMEOUT_S must be > 0")
        return value

    @field_validator("llm_max_attempts")
    @classmethod
    def validate_max_attempts(cls, value: int) -> int:
        if value < 1:
            raise ValueError("LLM_MAX_ATTEMPTS must be >= 1")
        return value

    @field_validator("llm_api_key")
    @classmethod
    def blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
