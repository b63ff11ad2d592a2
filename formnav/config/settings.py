"""
Configuration management for the form builder navigation core.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class NavigationSettings(BaseSettings):
    """Well-known routes and auth guard tuning."""

    home_route: str = Field(default="home")
    login_route: str = Field(default="login")
    not_found_route: str = Field(default="not_found")
    return_to_key: str = Field(default="return_to")
    auth_probe_timeout: float = Field(default=5.0, gt=0)
    session_token_path: str = Field(default="data/session.token")

    @field_validator("home_route", "login_route", "not_found_route", "return_to_key")
    @classmethod
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("Route names must not be blank")
        return v.strip()

    class Config:
        env_prefix = "NAV_"


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: str = Field(default="INFO")
    file_path: Optional[str] = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    class Config:
        env_prefix = "LOG_"


class Settings(BaseSettings):
    """Main application settings combining all configuration sections."""

    app_name: str = Field(default="Form Builder")
    environment: str = Field(default="development")

    # Sub-configurations
    navigation: NavigationSettings = NavigationSettings()
    logging: LoggingSettings = LoggingSettings()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        valid_envs = ["development", "test", "staging", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}")
        return v.lower()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
