"""
Configuration management for the chantier tracker.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ChantierTrackerConfig(BaseSettings):
    """Configuration settings for the chantier tracker."""

    # Data Configuration
    data_file: str = Field(default="chantiers.json", alias="DATA_FILE")
    user_id: Optional[str] = Field(default=None, alias="USER_ID")

    # Presentation Configuration
    currency_symbol: str = Field(default="€", alias="CURRENCY_SYMBOL")
    export_delimiter: str = Field(default=",", alias="EXPORT_DELIMITER")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("export_delimiter")
    @classmethod
    def validate_delimiter(cls, v):
        """Ensure the CSV delimiter is a single character."""
        if len(v) != 1:
            raise ValueError("Export delimiter must be a single character")
        return v


def load_config(env_file: Optional[str] = None) -> ChantierTrackerConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return ChantierTrackerConfig()


# Global configuration instance
_config: Optional[ChantierTrackerConfig] = None


def get_config() -> ChantierTrackerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> ChantierTrackerConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
