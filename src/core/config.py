"""
Core configuration module for the capacity optimizer.

This module manages process-level settings using Pydantic Settings,
providing type-safe configuration with environment variable support.
Search parameters live in ``src.optimization.core.config``.
"""

from typing import Any, Dict, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    app_name: str = "Capacity Optimizer"
    app_version: str = "1.0.0"
    environment: str = Field(default="development")

    # Logfire settings
    logfire_token: Optional[str] = Field(default=None)
    logfire_service_name: str = Field(default="capacity-optimizer")
    logfire_environment: str = Field(default="development")

    def get_logfire_settings(self) -> Dict[str, Any]:
        """Get Logfire configuration."""
        return {
            "token": self.logfire_token or None,
            "service_name": self.logfire_service_name,
            "environment": self.logfire_environment,
        }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        return self.environment.lower() == "development"


# Create global settings instance
settings = Settings()
