# src/rotation/engine.py — v1
"""Rotation engine: owns the live file handle and rotates it on size threshold.

States:
    Closed: no handle; the next ensure_open() creates one.
    Open:   a handle exists and tracks bytes written in the current generation.

Rotation closes the handle, renames the live file to its archive name and
replaces the handle with a fresh one at the original path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import BinaryIO, Callable

from lumberjack.core.errors import RotationFailed
from lumberjack.core.models import RotationConfig
from lumberjack.rotation.archive_namer import archive_name

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class OpenFileHandle:
    """Live file, its append-mode sink and the bytes written to it so far."""

    path: Path
    size: int
    sink: BinaryIO

    def close(self) -> None:
        try:
            self.sink.flush()
        finally:
            self.sink.close()


class RotationEngine:
    """Size-triggered rotation of a single live log file.

    Not thread-safe on its own; LogWriter serializes access.
    """

    def __init__(self, config: RotationConfig, clock: Clock | None = None) -> None:
        self._config = config
        self._clock = clock or utc_now
        self._handle: OpenFileHandle | None = None

    @property
    def config(self) -> RotationConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    @property
    def current_size(self) -> int:
        return self._handle.size if self._handle is not None else 0

    def ensure_open(self) -> None:
        """Open the live file if needed, seeding the size from disk."""
        if self._handle is not None:
            return
        path = self._config.target_path
        path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self._open(path, _probe_size(path))
        logger.debug("Opened %s (%d bytes)", path, self._handle.size)

    def record_write(self, byte_len: int) -> None:
        """Account for ``byte_len`` bytes just appended to the live file."""
        if self._handle is not None:
            self._handle.size += byte_len

    def write(self, data: bytes) -> None:
        """Append ``data`` to the live file and account for it."""
        if self._handle is None:
            raise RuntimeError("RotationEngine.write() called on a closed engine")
        self._handle.sink.write(data)
        self._handle.sink.flush()
        self.record_write(len(data))

    def maybe_rotate(self) -> Path | None:
        """Rotate the live file when it has reached the size threshold.

        Returns:
            The archive path, or None when no rotation was needed.

        Raises:
            RotationFailed: If the rename or the reopen failed. When only the
                rename failed the engine is left open on the original path.
        """
        handle = self._handle
        if handle is None or handle.size < self._config.max_size_bytes:
            return None

        target = handle.path
        archive = self._next_archive_path(target)
        self._handle = None
        handle.close()

        try:
            os.rename(target, archive)
        except OSError as e:
            logger.error("Failed to rotate %s to %s: %s", target, archive, e)
            self._reopen_after_failure(target, archive, e)
            raise RotationFailed(target, archive, str(e)) from e

        try:
            self._handle = self._open(target, 0)
        except OSError as e:
            logger.error("Failed to reopen %s after rotation: %s", target, e)
            raise RotationFailed(
                target, archive, f"reopen failed: {e}", archived=True
            ) from e

        logger.debug("Rotated %s to %s", target, archive.name)
        return archive

    def close(self) -> None:
        """Flush and close the live file. No-op when already closed."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()

    def _open(self, path: Path, size: int) -> OpenFileHandle:
        return OpenFileHandle(path=path, size=size, sink=open(path, "ab"))

    def _reopen_after_failure(self, target: Path, archive: Path, cause: OSError) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self._open(target, _probe_size(target))
        except OSError as e:
            logger.error("Failed to reopen %s after failed rotation: %s", target, e)
            raise RotationFailed(
                target, archive, f"{cause}; reopen failed: {e}"
            ) from cause

    def _next_archive_path(self, target: Path) -> Path:
        """Archive path for now(), advanced past any archive already on disk."""
        ts = self._clock()
        archive = archive_name(target, ts)
        while archive.exists():
            ts += timedelta(milliseconds=1)
            archive = archive_name(target, ts)
        return archive


def _probe_size(path: Path) -> int:
    """Current size of ``path``; 0 when missing or when the probe fails."""
    try:
        return path.stat().st_size
    except FileNotFoundError:
        return 0
    except OSError as e:
        logger.warning("Unable to get current size of %s, assuming 0: %s", path, e)
        return 0
