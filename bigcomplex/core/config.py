"""
Library configuration.

Centralized configuration management with environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """bigcomplex settings"""

    model_config = SettingsConfigDict(
        env_prefix="BIGCOMPLEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Engine
    PRECISION: int = 20  # decimal digits, applied by setup_precision()

    # Comparison
    APPROX_TOLERANCE: str = "1e-6"  # absolute, per component

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
