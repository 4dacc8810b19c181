"""
Configuration for Self-Check Triage.

GOVERNANCE:
- No persistence settings (results go to the calling collaborator)
- Catalog location is the only data input
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Assessment settings
    default_language: str = "english"
    # Value every symptom answer starts at when a category is selected
    default_answer_value: int = Field(default=1, ge=1, le=10)
    # Overrides the packaged catalog data directory
    catalog_dir: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "SELFCHECK_"}


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
