"""
Configuration settings for the Art Visualizer application
"""
from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

ORCHESTRATION_STRATEGIES = ("single_call", "pipeline")


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Art Visualizer API"
    version: str = "1.0.0"
    environment: str = "development"
    debug: bool = True

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]

    # Google Gemini
    gemini_api_key: str = Field(default="", validation_alias=AliasChoices("gemini_api_key", "google_api_key"))
    gemini_image_model: str = "gemini-2.5-flash-image"
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_timeout_seconds: Optional[float] = None

    # Orchestration: "single_call" (one image edit) or "pipeline" (analyze -> prompt -> generate)
    orchestration_strategy: str = "single_call"

    # Uploads
    strict_data_urls: bool = True
    max_image_dimension: int = 0  # 0 disables downscaling

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env

    @field_validator("orchestration_strategy")
    @classmethod
    def _check_strategy(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ORCHESTRATION_STRATEGIES:
            raise ValueError(f"orchestration_strategy must be one of {', '.join(ORCHESTRATION_STRATEGIES)}, got {value!r}")
        return value

    @field_validator("max_image_dimension")
    @classmethod
    def _check_max_dimension(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_image_dimension cannot be negative")
        return value

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key.strip())


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process-wide settings."""
    return settings
