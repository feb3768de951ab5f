"""Configuration management for the scope filter engine."""

from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ParamStyle(str, Enum):
    """DB-API placeholder styles supported by the predicate builder."""

    QMARK = "qmark"
    FORMAT = "format"
    NUMERIC = "numeric"


class Settings(BaseSettings):
    """Scope filter settings."""

    model_config = SettingsConfigDict(
        env_prefix="SCOPEFILTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "scopefilter"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # SQL generation
    sql_paramstyle: ParamStyle = Field(
        ParamStyle.QMARK, description="Placeholder style for bound arguments"
    )
    log_denied_filters: bool = Field(
        False, description="Log at INFO when a filter resolves to deny-all"
    )

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_json: bool = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for getting settings
settings = get_settings()
