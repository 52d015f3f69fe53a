# src/__init__.py — v1
"""lumberjack: size-triggered log file rotation with bounded retention."""

from lumberjack.core.errors import (
    InvalidConfig,
    InvalidSizeSpec,
    LumberjackError,
    RotationFailed,
)
from lumberjack.rotation.writer import LogWriter
from lumberjack.version import __version__

__all__ = [
    "InvalidConfig",
    "InvalidSizeSpec",
    "LogWriter",
    "LumberjackError",
    "RotationFailed",
    "__version__",
]
