# src/rotation/writer.py — v1
"""LogWriter: append records to a size-rotated log file with bounded retention.

Per record, strictly in order:
    ensure_open -> maybe_rotate -> prune -> append -> record_write

Records are written verbatim. Callers supply their own line terminator.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from types import TracebackType

from lumberjack.core.errors import RotationFailed
from lumberjack.core.models import RotationConfig
from lumberjack.rotation.engine import Clock, RotationEngine
from lumberjack.rotation.pruner import prune

logger = logging.getLogger(__name__)


class LogWriter:
    """Thread-safe writer for one live log file and its archives."""

    def __init__(
        self,
        file_name: str | Path,
        max_size: int | str,
        max_backups: int,
        *,
        clock: Clock | None = None,
    ) -> None:
        """Validate configuration; the file itself is opened on first write.

        Args:
            file_name: Live log file path, resolved to an absolute path.
            max_size: Rotation threshold in bytes or as '<number><k|m|g>'.
            max_backups: Number of archives kept after pruning.
            clock: Source of rotation timestamps (defaults to UTC now).

        Raises:
            InvalidConfig: If file_name is empty or a limit is out of range.
            InvalidSizeSpec: If max_size is malformed.
        """
        config = RotationConfig(
            target_path=file_name,  # type: ignore[arg-type]
            max_size_bytes=max_size,  # type: ignore[arg-type]
            max_backups=max_backups,
        )
        self._init(config, clock)

    @classmethod
    def from_config(cls, config: RotationConfig, *, clock: Clock | None = None) -> LogWriter:
        writer = cls.__new__(cls)
        writer._init(config, clock)
        return writer

    def _init(self, config: RotationConfig, clock: Clock | None) -> None:
        self._config = config
        self._engine = RotationEngine(config, clock=clock)
        self._lock = threading.RLock()
        self.rotations = 0
        self.last_archive: Path | None = None

    @property
    def config(self) -> RotationConfig:
        return self._config

    @property
    def file_name(self) -> Path:
        return self._config.target_path

    @property
    def current_size(self) -> int:
        return self._engine.current_size

    def write(self, record: bytes | str) -> None:
        """Append one record, rotating and pruning first when needed.

        Raises:
            RotationFailed: Rotation could not complete. ``record_written``
                tells whether the record still reached the live file.
            OSError: Opening or appending to the live file failed.
        """
        data = record.encode("utf-8") if isinstance(record, str) else record
        if not data:
            return

        with self._lock:
            self._engine.ensure_open()

            failure: RotationFailed | None = None
            try:
                archive = self._engine.maybe_rotate()
            except RotationFailed as e:
                failure = e
                archive = e.archive if e.archived else None
            if archive is not None:
                self.rotations += 1
                self.last_archive = archive

            prune(
                self._config.directory,
                self._config.base,
                self._config.ext,
                self._config.max_backups,
            )

            if failure is not None:
                if self._engine.is_open:
                    self._engine.write(data)
                    failure.record_written = True
                raise failure

            self._engine.write(data)

    def close(self) -> None:
        """Flush and close the live file; later writes reopen it."""
        with self._lock:
            self._engine.close()

    def __enter__(self) -> LogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"LogWriter({str(self._config.target_path)!r}, "
            f"max_size={self._config.max_size_bytes}, "
            f"max_backups={self._config.max_backups})"
        )
