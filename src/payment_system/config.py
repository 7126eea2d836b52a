from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(default="", alias="PAYMENT_API_BASE_URL")
    api_timeout_seconds: float = Field(default=20.0, alias="PAYMENT_API_TIMEOUT")
    api_max_attempts: int = Field(default=1, alias="PAYMENT_API_MAX_ATTEMPTS")

    default_user_id: Optional[int] = Field(default=None, alias="PAYMENT_USER_ID")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    def validate_required(self) -> None:
        if not self.api_base_url:
            raise ValueError("PAYMENT_API_BASE_URL is required")

        if not self.api_base_url.startswith(("http://", "https://")):
            raise ValueError("PAYMENT_API_BASE_URL must start with http:// or https://")

        if self.api_max_attempts < 1:
            raise ValueError("PAYMENT_API_MAX_ATTEMPTS must be >= 1")


@lru_cache
def load_settings() -> Settings:
    settings = Settings()
    settings.validate_required()
    return settings
