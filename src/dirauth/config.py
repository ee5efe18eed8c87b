"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dirauth.domain.value_objects import ObjectPermissionType


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Directory
    implicit_permissions: list[ObjectPermissionType] = Field(
        default_factory=lambda: [
            ObjectPermissionType.READ,
            ObjectPermissionType.UPDATE,
            ObjectPermissionType.DELETE,
            ObjectPermissionType.ADMINISTER,
        ],
        description="Object permissions granted to the creator of a new object",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
