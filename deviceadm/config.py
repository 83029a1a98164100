"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The connection endpoint comes from the environment (MONGO_URL) or .env
    - get_settings() is cached (lru_cache) — single instance per process
    - Database and collection names are NOT settings (fixed in device_store.py)

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Bare host[:port] accepted and normalized: deployments pass plain hostnames
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Store settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # MongoDB
    mongo_url: str = "mongodb://localhost:27017"
    mongo_server_selection_timeout_ms: int = Field(5000, gt=0)

    @field_validator("mongo_url", mode="before")
    @classmethod
    def add_mongo_scheme(cls, v: str) -> str:
        """mongo-db:27017 → mongodb://mongo-db:27017."""
        if isinstance(v, str) and "://" not in v:
            return f"mongodb://{v}"
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
