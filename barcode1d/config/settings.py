"""
Library settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BARCODE1D_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Default rendering characters
    line_character: str = Field("1", min_length=1, description="Character for one unit of bar")
    space_character: str = Field("0", min_length=1, description="Character for one unit of space")
    w_character: str = Field("w", min_length=1, description="Character for a wide element")
    n_character: str = Field("n", min_length=1, description="Character for a narrow element")
    wn_ratio: Literal[2, 3] = Field(2, description="Units per wide element in bar/rle output")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()
