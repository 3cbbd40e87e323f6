"""Settings — every tunable of the service, read from the environment or .env.

Invariants:
    - get_settings() returns one cached Settings per process
    - 0 <= apply_delay_min_ms <= apply_delay_max_ms (startup fails otherwise)
    - postgresql:// URLs are rewritten to the asyncpg driver

Design Decisions:
    - pydantic-settings: typed env parsing and a .env file for local runs
    - SQLite file database by default so a fresh checkout starts without a server
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./pursuit.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql://; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    seed_demo_data: bool = True

    # Persisted preferences
    storage_key_prefix: str = "pursuit"

    # Simulated apply latency (last request wins)
    apply_delay_min_ms: int = 300
    apply_delay_max_ms: int = 600

    @model_validator(mode="after")
    def check_delay_bounds(self):
        if self.apply_delay_min_ms < 0 or self.apply_delay_max_ms < self.apply_delay_min_ms:
            raise ValueError("apply delay bounds must satisfy 0 <= min <= max")
        return self

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
