"""Application configuration using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    ENVIRONMENT: str | None = Field(
        default=None,
        description="Deployment mode; 'development' turns on SQL logging",
    )
    LOG_LEVEL: str = "INFO"

    # Migrations
    RUN_MIGRATIONS: bool = Field(
        default=False,
        description="Apply pending migrations when the service starts",
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"


settings = Settings()
