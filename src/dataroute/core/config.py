# dataroute/core/config.py
"""
Central configuration for the routing runtime.

Environment variables (or a ``.env`` file) override defaults.
"""
from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    raw_base_path: str = Field(
        default="/raw/",
        description="Mount prefix of the raw data endpoint",
    )
    expose_hidden_services: bool = Field(
        default=False,
        description="Serve data services whose entity name starts with '_'",
    )

    @field_validator("raw_base_path")
    @classmethod
    def _normalize_base_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"raw_base_path must start with '/', got '{value}'")
        return value if value.endswith("/") else value + "/"


settings = Settings()
