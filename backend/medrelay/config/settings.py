"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Allow extra fields from .env files that aren't defined here
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "Medical AI Relay"
    environment: str = Field(
        default="local",
        validation_alias=AliasChoices("SYSTEM_ENVIRONMENT", "ENVIRONMENT"),
    )
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Supabase settings (identity provider + profile store)
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # OpenAI settings
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    report_max_tokens: int = 300
    report_temperature: float = 0.5

    # Cloudinary settings
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "notes_images"

    # CORS settings
    allowed_origins: List[str] = ["http://localhost:8080"]

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.cloudinary_cloud_name
            and self.cloudinary_api_key
            and self.cloudinary_api_secret
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
