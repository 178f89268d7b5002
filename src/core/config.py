"""Application settings, read from the environment (prefix HERDS_) or a .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HERDS_", env_file=".env", env_file_encoding="utf-8"
    )

    database_url: str = Field(
        default="sqlite:///./herds.db", description="SQLAlchemy URL of the game store"
    )
    echo_sql: bool = Field(default=False, description="Let SQLAlchemy log statements")
    log_level: str = Field(default="INFO", description="Root logging level")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
