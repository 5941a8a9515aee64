"""Configuration management for PsychoScore.

This module handles configuration loading and validation using Pydantic
Settings, so every value can be overridden from the environment or a .env
file.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, ValidationError as PydanticValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from psychoscore.utils.constants import ErrorCodes
from psychoscore.utils.exceptions import ConfigurationError
from psychoscore.utils.logger import setup_logging


class Settings(BaseSettings):
    """Application settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="PsychoScore", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )
    APP_DEBUG: bool = Field(default=True, description="Debug mode")
    APP_HOST: str = Field(default="0.0.0.0", description="Application host")
    APP_PORT: int = Field(default=8000, description="Application port", ge=1, le=65535)

    # API Settings
    API_V1_PREFIX: str = Field(default="/api/v1", description="API v1 prefix")
    ENABLE_API_DOCS: bool = Field(default=True, description="Enable API documentation")
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    LOG_FORMAT: str = Field(
        default="text", description="Log format", pattern="^(json|text)$"
    )
    LOG_TO_FILE: bool = Field(default=False, description="Write rotating log files")
    LOG_DIR: str = Field(default="logs", description="Directory for log files")

    @field_validator("API_V1_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        """Normalize the prefix to a leading slash and no trailing slash."""
        v = "/" + v.strip("/")
        return "" if v == "/" else v

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Apply environment-specific overrides."""
        if self.APP_ENV == "production":
            self.APP_DEBUG = False
            self.LOG_FORMAT = "json"
            self.LOG_LEVEL = "INFO" if self.LOG_LEVEL == "DEBUG" else self.LOG_LEVEL

        return self

    def is_production(self) -> bool:
        return self.APP_ENV == "production"

    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    def is_test(self) -> bool:
        return self.APP_ENV == "test"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance and configure logging from it.

    Returns:
        Settings: Application settings instance

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    try:
        settings = Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid application settings",
            config_key=", ".join(str(error["loc"][0]) for error in e.errors() if error["loc"]),
            error_code=ErrorCodes.CONFIGURATION_ERROR,
            cause=e,
        ) from e

    setup_logging(
        environment=settings.APP_ENV,
        log_level=settings.LOG_LEVEL,
        log_to_file=settings.LOG_TO_FILE,
        log_dir=settings.LOG_DIR,
        log_format=settings.LOG_FORMAT,
    )

    return settings
