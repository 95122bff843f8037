"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hibc.barcode.alphabet import DEFAULT_MODULUS, HIBC_ALPHABET


class Settings(BaseSettings):
    """Configuration loaded from HIBC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HIBC_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Check digit validation
    labeler_code: str = Field("", description="Expected labeler identification code prefix")
    modulus: int = Field(
        DEFAULT_MODULUS,
        ge=1,
        le=len(HIBC_ALPHABET),
        description="Check digit modulus",
    )

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"

    @field_validator("labeler_code")
    @classmethod
    def strip_labeler_code(cls, v: str) -> str:
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
