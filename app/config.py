# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import settings
#   print(settings.DB_NAME)
#
# Configuration comes from the process environment only; there is no config
# file. Empty variables are treated as unset so their defaults apply.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lib.postgres_client import ConnectionParameters

# The database always runs next to the service (sidecar / same host).
DB_HOST = "127.0.0.1"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Nothing is required: every database credential defaults to an empty
    string and is passed to the server as-is.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------

    DB_USER: str = Field(
        default="",
        description="PostgreSQL user"
    )

    DB_PASSWORD: str = Field(
        default="",
        description="PostgreSQL password"
    )

    DB_NAME: str = Field(
        default="",
        description="PostgreSQL database name"
    )

    DB_PORT: str = Field(
        default="5432",
        description="PostgreSQL port (kept as text, validated when connecting)"
    )

    RECORD_TABLE: str = Field(
        default="tablea",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Table receiving records from POST /data"
    )

    # -------------------------------------------------------------------------
    # HTTP Server
    # -------------------------------------------------------------------------

    PORT: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    API_PREFIX: str = Field(
        default="/drizzlego",
        description="Path prefix for every route"
    )

    EXPOSE_ERROR_DETAILS: bool = Field(
        default=True,
        description="Return raw decode/database error text in 400/500 responses"
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level"
    )

    LOG_FORMAT: Literal["console", "json"] = Field(
        default="console",
        description="console: human-readable key=value lines, json: one object per line"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        # DB_PORT="" behaves like an unset DB_PORT
        env_ignore_empty=True,
        # Case-sensitive environment variable names
        case_sensitive=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def connection_params(self) -> ConnectionParameters:
        """Parameters for the datastore connector."""
        return ConnectionParameters(
            host=DB_HOST,
            port=self.DB_PORT,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            database=self.DB_NAME,
        )

    @property
    def route_prefix(self) -> str:
        """
        API_PREFIX normalized for APIRouter: leading slash, no trailing slash.

        Example: "drizzlego/" -> "/drizzlego", "/" -> ""
        """
        prefix = self.API_PREFIX.strip().strip("/")
        return f"/{prefix}" if prefix else ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only read and validate the environment once,
    not on every access.

    Returns:
        Settings: The application settings instance
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
