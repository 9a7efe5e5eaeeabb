from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Literal
from functools import lru_cache


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    display_language: Literal["sv", "en"] = Field(
        default="sv",
        description="Language for status labels and user-facing messages"
    )
    analysis_backend_url: str = Field(
        default="http://localhost:3000",
        description="Vision analysis backend URL"
    )
    analysis_timeout: float = Field(
        default=60.0,
        description="Timeout in seconds for a single backend analysis call"
    )
    max_ingredients: int = Field(
        default=200,
        description="Maximum number of ingredients accepted per annotate request"
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level"
    )
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
