"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (moderation API key, database password) come from environment variables
    - get_settings() is cached (lru_cache): single instance per process
    - Every outbound call has a timeout budget taken from here

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion and .env file support
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://qa:qa@localhost:5432/rustwebdev"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 0
    storage_timeout_seconds: float = 10.0

    # Moderation (bad-words censoring service)
    moderation_url: str = "https://api.apilayer.com/bad_words"
    moderation_api_key: str = "apilayer-placeholder"
    moderation_censor_character: str = "*"
    moderation_timeout_seconds: float = 10.0

    # API
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_headers: list[str] = ["Content-Type"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
