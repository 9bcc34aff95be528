"""Configuration management using pydantic-settings."""
from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Image provider selection. Chosen once at startup, never per request.
    image_provider: Literal["gemini", "pollinations"] = "pollinations"

    # Authenticated multimodal provider
    gemini_api_key: str = ""
    gemini_model: str = "gemini-3-pro-image-preview"

    # Keyless public provider
    pollinations_base_url: str = "https://image.pollinations.ai/prompt"
    pollinations_model: str = "flux"

    # None disables the caller-side timeout race
    generation_timeout_seconds: Optional[float] = None

    # Profile collections are stored as JSON files under this directory
    data_dir: str = "data"

    # Application settings
    app_name: str = "canon-forge"

    # Server settings
    backend_host: str = "localhost"
    backend_port: int = 8000
    frontend_port: int = 3000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
