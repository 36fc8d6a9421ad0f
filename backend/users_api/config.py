"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - PORT defaults to 4000 and is overridable from the environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with no .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 4000

    # API
    app_title: str = "Users API"
    app_version: str = "1.0.0"
    docs_url: str = "/api-docs"
    cors_origins: list[str] = ["*"]
    openapi_servers: list[str] = [
        "http://localhost:4000",
        "http://localhost:3005",
    ]

    # Rate limiting (slowapi / limits notation)
    users_rate_limit: str = "100/15minutes"
    rate_limit_enabled: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        return v.strip().lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()
