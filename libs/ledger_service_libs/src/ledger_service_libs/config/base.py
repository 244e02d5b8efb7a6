"""Base settings shared by gateway services.

Services subclass ``ServiceSettings`` and set their own ``model_config``
(env prefix, env file).
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class ServiceSettings(BaseSettings):
    """Common settings with environment detection helpers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    SERVICE_NAME: str = "unnamed-service"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    def is_development(self) -> bool:
        return self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TESTING)

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
