"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - discord_public_key is validated as 32 bytes of hex before the app starts

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://xpd:xpd@db:5432/xpd"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Discord
    discord_public_key: str = "0" * 64
    discord_application_id: int = 0
    discord_api_base: str = "https://discord.com/api/v10"
    followup_timeout_seconds: float = 10.0

    @field_validator("discord_public_key")
    @classmethod
    def check_public_key(cls, v: str) -> str:
        """Ed25519 public key: 32 bytes, hex-encoded."""
        v = v.strip()
        try:
            raw = bytes.fromhex(v)
        except ValueError:
            raise ValueError("discord_public_key must be hex-encoded")
        if len(raw) != 32:
            raise ValueError("discord_public_key must be 32 bytes (64 hex chars)")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
