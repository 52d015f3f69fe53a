# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Every field can be set through an environment variable prefixed with
LUMBERJACK_, e.g. LUMBERJACK_MAX_SIZE=5m.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lumberjack.core.errors import InvalidSizeSpec
from lumberjack.core.models import RotationConfig
from lumberjack.rotation.size_parser import parse_size


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="LUMBERJACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Rotation ===
    file_name: str = "logs/app.log"
    max_size: str = "10m"
    max_backups: int = 5

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_service: str = ""

    # --- Validators ---

    @field_validator("max_backups")
    @classmethod
    def validate_max_backups(cls, v: int) -> int:
        if v < 0:
            raise ValueError("max_backups must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field rules before any file is touched."""
        errors: list[str] = []

        if not self.file_name.strip():
            errors.append("FILE_NAME must not be empty")

        try:
            if parse_size(self.max_size_value) <= 0:
                errors.append("MAX_SIZE must be positive")
        except InvalidSizeSpec as e:
            errors.append(f"MAX_SIZE: {e}")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def max_size_value(self) -> int | str:
        """max_size as an int when it is a plain byte count."""
        raw = self.max_size.strip()
        return int(raw) if raw.isdigit() else raw

    def rotation_config(self) -> RotationConfig:
        """Build the immutable RotationConfig for these settings."""
        return RotationConfig(
            target_path=self.file_name,  # type: ignore[arg-type]
            max_size_bytes=self.max_size_value,  # type: ignore[arg-type]
            max_backups=self.max_backups,
        )


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
