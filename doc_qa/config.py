"""
Configuration management for the Multilingual Document QA service.
Handles environment variables and application settings.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    app_name: str = Field(default="Multilingual Document QA API")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    cors_origins: List[str] = Field(default=["*"])

    # Google AI Configuration
    google_api_key: str = Field(...)
    google_chat_model: str = Field(default="gemini-2.5-flash")
    google_translate_model: str = Field(default="gemini-1.5-flash")
    google_temperature: float = Field(default=0.1)
    google_max_tokens: Optional[int] = Field(default=None)

    # File Processing Configuration
    max_file_size_mb: int = Field(default=10)
    max_pages: int = Field(default=100)
    allowed_file_types: List[str] = Field(default=["pdf"])

    # Answer Configuration
    answer_confidence: float = Field(default=0.85)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from environment


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def validate_required_settings() -> None:
    """Validate that all required settings are present."""
    required_settings = [
        ("google_api_key", settings.google_api_key),
    ]

    missing_settings = []
    for setting_name, setting_value in required_settings:
        if not setting_value:
            missing_settings.append(setting_name)

    if missing_settings:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing_settings).upper()}. "
            "Please check your .env file."
        )
