"""
Configuration management for Create Typical Building.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Can be configured via environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CREATE_TYPICAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    geometry_dir: Path = Field(
        default=Path("data/geometry"),
        description="Directory holding the prototype geometry IDF files",
    )
    weather_cache_dir: Path = Field(
        default=Path.home() / ".create_typical" / "weather",
        description="Cache for downloaded EPW/DDY/STAT files",
    )

    # EnergyPlus settings
    energyplus_idd_path: Path | None = Field(default=None, description="Path to Energy+.idd")

    # OpenStudio settings
    openstudio_path: str | None = Field(default=None, description="Path to the openstudio CLI")
    generator_timeout_seconds: int = Field(
        default=1800, description="Maximum runtime of the standards generator"
    )


# Global settings instance
settings = Settings()
