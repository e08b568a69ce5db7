"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# One week, in seconds
DEFAULT_TRACKER_KEY_MIN_VALIDITY = 604_800


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./data.db",
        description="Connection URL for the index database (normalized to an async driver)",
        alias="TORRUST_INDEX_DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo every SQL statement issued by the engine",
        alias="TORRUST_INDEX_DATABASE_ECHO",
    )
    tracker_key_min_validity: int = Field(
        default=DEFAULT_TRACKER_KEY_MIN_VALIDITY,
        ge=0,
        description="Seconds a tracker key must still be valid for to be handed out again",
        alias="TORRUST_INDEX_TRACKER_KEY_MIN_VALIDITY",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="TORRUST_INDEX_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log record format (simple, detailed, json)",
        alias="TORRUST_INDEX_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory receiving the log file when file logging is enabled",
        alias="TORRUST_INDEX_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write DEBUG-level logs to a file in addition to the console",
        alias="TORRUST_INDEX_ENABLE_FILE_LOGGING",
    )


settings = Settings()
