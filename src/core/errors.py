# src/core/errors.py — v1
"""Error kinds raised by the rotation engine and its configuration layer.

None of these subclass ValueError, so raising them inside a pydantic
validator propagates the original exception instead of a ValidationError.
"""

from __future__ import annotations

from pathlib import Path


class LumberjackError(Exception):
    """Base class for all lumberjack errors."""


class InvalidConfig(LumberjackError):
    """Raised at construction when the rotation configuration is unusable."""


class InvalidSizeSpec(InvalidConfig):
    """Raised when a size specification such as '5m' cannot be parsed."""

    def __init__(self, spec: object, reason: str = "") -> None:
        self.spec = spec
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Invalid size specification {spec!r}{detail}. "
            "Use a byte count or <number><k|m|g>, e.g. '5m'."
        )


class RotationFailed(LumberjackError):
    """Renaming or reopening the live file failed during rotation.

    ``archived`` is True when the live file was already renamed to
    ``archive`` and only the reopen failed. ``record_written`` is set by the
    writer once it knows whether the record that triggered the rotation still
    reached the live file.
    """

    def __init__(
        self,
        target: Path,
        archive: Path | None,
        reason: str,
        record_written: bool = False,
        archived: bool = False,
    ) -> None:
        self.target = target
        self.archive = archive
        self.reason = reason
        self.archived = archived
        self.record_written = record_written
        super().__init__(f"Rotation of {target} to {archive} failed: {reason}")
