"""
cashcard_service.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `CASHCARD_`), safe defaults for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="CASHCARD_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "cashcard-service"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./cashcard.db"
    seed_sample_data: bool = False

    # Paging defaults for GET /cashcards
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=2000, ge=1)

    # Work factor used when hashing the provisioned principals at startup.
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()
