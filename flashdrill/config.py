"""
Configuration management for flashdrill.

Values come from ``FLASHDRILL_*`` environment variables or a ``.env`` file;
command-line options override them.
"""

from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Defines application settings, loaded from environment variables or .env files.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLASHDRILL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Card file loaded before the interactive loop starts.
    import_from: Optional[Path] = None

    # Card file written after the user exits.
    export_to: Optional[Path] = None

    # Seed for the random card picker; None means nondeterministic.
    seed: Optional[int] = None

    log_level: str = "WARNING"

    @field_validator("import_from", "export_to", mode="before")
    @classmethod
    def empty_path_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(
                f"Invalid log_level: '{v}'. Allowed: {sorted(allowed)}."
            )
        return level


def get_settings(**overrides) -> Settings:
    """Build settings, letting non-None keyword arguments win over the environment."""
    explicit = {k: v for k, v in overrides.items() if v is not None}
    return Settings(**explicit)
