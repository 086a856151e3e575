"""
Runtime settings.

Loaded from environment variables (HOST, PORT, LOG_LEVEL, ...) and an optional
.env file. List values such as CORS_ORIGINS are given as JSON, e.g.
CORS_ORIGINS='["http://localhost:3000"]'.
"""
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    log_format: str = Field("console", pattern="^(console|json)$")
    mock_latency_seconds: float = Field(0.0, ge=0)
    seed_data: bool = True
    default_language: str = "en"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
