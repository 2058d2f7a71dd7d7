"""
Discovery configuration using Pydantic Settings.

Loads defaults from environment variables (``DISCOVERY_*``) and a .env file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Discovery settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="DISCOVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = Field(default="development", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")

    # Default source tree
    root: str | None = Field(
        default=None,
        description="Absolute base directory (defaults to the working directory)",
    )
    path: str = Field(default="app", description="Directory under root holding the source tree")
    namespace: str = Field(default="App", description="Identifier prefix mapped to path")
    recursive: bool = Field(default=False, description="Scan subdirectories by default")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env.lower() == "development"

    def resolved_root(self) -> str:
        """Root directory to scan from."""
        return self.root or str(Path.cwd())


# Global settings instance
settings = Settings()
