"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables (prefixed with
LEDGER_), with an optional .env file as a fallback.

Pydantic Settings automatically:
  1. Reads from environment variables (highest priority)
  2. Falls back to .env file values
  3. Uses defaults defined here (lowest priority)

Command-line flags given to `ledger-replay` override these values for a
single run.

Usage:
    from ledger.config import settings
    print(settings.LOG_LEVEL)
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the ledger replay tool."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    APP_NAME: str = "Ledger Replay"
    APP_VERSION: str = "0.1.0"

    # --- Logging ---
    # Diagnostics go to stderr; stdout is reserved for the balances CSV.
    # Rejected transactions are logged at DEBUG, malformed rows at WARNING.
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["text", "json"] = "text"

    # --- Output ---
    # Account order is not part of the output contract; sorting by client id
    # makes the report reproducible across runs.
    SORT_OUTPUT: bool = False


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
