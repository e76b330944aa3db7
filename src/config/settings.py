"""Client-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CLIENT_VERSION = "0.3.0"


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    environment: Literal["local", "dev", "prod"] = Field(default="local")
    log_level: str = Field(default="INFO")

    # Twilio account
    twilio_account_sid: str | None = Field(default=None)
    twilio_auth_token: str | None = Field(default=None)

    # REST endpoint
    twilio_api_base_url: str = Field(
        default="https://api.twilio.com",
        description="Scheme and host of the REST API.",
    )
    twilio_api_version: str = Field(default="2010-04-01")
    twilio_response_format: Literal["xml", "json"] = Field(
        default="xml",
        description="Body format requested from the API; json appends the .json suffix.",
    )
    twilio_request_timeout: float = Field(default=30.0, gt=0.0)
    twilio_user_agent: str = Field(default=f"twilio-rest-client/{CLIENT_VERSION} (python)")

    @field_validator("twilio_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
