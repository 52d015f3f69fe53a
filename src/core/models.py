# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from lumberjack.core.errors import InvalidConfig
from lumberjack.rotation.archive_namer import split_base_ext
from lumberjack.rotation.size_parser import parse_size


# === CONFIGURATION ===


class RotationConfig(BaseModel):
    """Immutable rotation settings for one live log file."""

    model_config = ConfigDict(frozen=True)

    target_path: Path
    max_size_bytes: int
    max_backups: int

    @field_validator("target_path", mode="before")
    @classmethod
    def resolve_target_path(cls, v: object) -> Path:
        """Reject empty paths and resolve the rest to an absolute path."""
        if v is None or (isinstance(v, (str, Path)) and not str(v).strip()):
            raise InvalidConfig("A target file name is required")
        if not isinstance(v, (str, Path)):
            raise InvalidConfig(f"Target file name must be a path, got {type(v).__name__}")
        return Path(os.path.abspath(Path(v).expanduser()))

    @field_validator("max_size_bytes", mode="before")
    @classmethod
    def parse_max_size(cls, v: object) -> int:
        return parse_size(v)  # type: ignore[arg-type]

    @model_validator(mode="after")
    def validate_limits(self) -> RotationConfig:
        if self.max_size_bytes <= 0:
            raise InvalidConfig(f"max_size must be positive, got {self.max_size_bytes}")
        if self.max_backups < 0:
            raise InvalidConfig(f"max_backups must be >= 0, got {self.max_backups}")
        return self

    # --- Helpers ---

    @property
    def directory(self) -> Path:
        return self.target_path.parent

    @property
    def base(self) -> str:
        return split_base_ext(self.target_path)[0]

    @property
    def ext(self) -> str:
        return split_base_ext(self.target_path)[1]


# === ARCHIVES ===


class ArchiveEntry(BaseModel):
    """A rotated log file and the UTC timestamp parsed from its name."""

    path: Path
    timestamp: datetime

    @property
    def name(self) -> str:
        return self.path.name
