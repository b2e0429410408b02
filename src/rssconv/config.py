from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment/.env."""

    user_agent: str = Field(default="rssconv/0.1")
    http_timeout: float | None = Field(default=None)
    follow_redirects: bool = Field(default=True)
    continue_on_error: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="RSSCONV_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
