"""
Centralized configuration for the Pokedex CLI.

All environment variables and defaults live here.

Usage:
    from pokedex.config import settings

    retention = settings.CACHE_RETENTION_SECONDS

Environment Variables:
    Every field can be overridden via a .env file or the environment,
    e.g. ``CACHE_RETENTION_SECONDS=60``.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pokedex settings loaded from environment variables."""

    # ========== PokeAPI ==========
    POKEAPI_BASE_URL: str = Field(
        default="https://pokeapi.co/api/v2",
        description="Base URL of the PokeAPI service"
    )
    LOCATION_PAGE_SIZE: int = Field(
        default=20,
        description="Location areas shown per map/mapb page"
    )
    HTTP_TIMEOUT: float = Field(
        default=10.0,
        description="Timeout for a single HTTP request (seconds)"
    )

    # ========== Cache ==========
    CACHE_RETENTION_SECONDS: float = Field(
        default=300.0,
        description="How long fetched responses are kept before the sweeper drops them"
    )

    # ========== Catching ==========
    CATCH_SEED: Optional[int] = Field(
        default=None,
        description="Seed for the catch RNG (unset = nondeterministic)"
    )

    # ========== Logging ==========
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Console logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    LOG_FILE_ENABLED: bool = Field(
        default=False,
        description="Enable file logging"
    )
    LOG_DIR: Path = Field(
        default=Path("./logs"),
        description="Directory for log files"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )


# Singleton instance - import this everywhere
settings = Settings()
