from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the blog data-access layer.

    Reads from environment variables (or .env via pydantic-settings):
      - DATABASE_URL (any SQLAlchemy URL, e.g. mysql+pymysql://..., postgresql://...,
        sqlite:///blog.db)
      - SQL_ECHO
      - SQL_POOL_PRE_PING
      - LOG_LEVEL
    """

    DATABASE_URL: Optional[str] = Field(
        default=None, description="SQLAlchemy connection URL for the blog database."
    )

    # SQLAlchemy engine options
    SQL_ECHO: bool = Field(
        default=False, description="Echo SQL statements for debugging (default False)"
    )
    SQL_POOL_PRE_PING: bool = Field(
        default=True, description="Test pooled connections before handing them out"
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def database_url(self) -> str:
        """Return the configured connection URL or fail loudly when it is missing."""
        if not self.DATABASE_URL:
            raise ValueError(
                "Database configuration missing. Ensure DATABASE_URL is set in the environment."
            )
        return self.DATABASE_URL


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return a settings object populated from the environment."""
    return Settings()
