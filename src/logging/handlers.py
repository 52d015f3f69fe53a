# src/logging/handlers.py — v2
"""logging.Handler that writes formatted records through a rotating LogWriter."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from lumberjack.rotation.writer import LogWriter


class RotatingLogHandler(logging.Handler):
    """Append each formatted record, plus ``terminator``, to a LogWriter.

    Records emitted while this handler is already writing on the same thread
    (for instance a prune warning logged by the writer itself) are passed to
    ``logging.lastResort`` instead of being written recursively.
    """

    terminator = "\n"

    def __init__(
        self,
        writer: LogWriter,
        level: int = logging.NOTSET,
        encoding: str = "utf-8",
    ) -> None:
        super().__init__(level)
        self.writer = writer
        self.encoding = encoding
        self._local = threading.local()

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "busy", False):
            if logging.lastResort is not None and record.levelno >= logging.lastResort.level:
                logging.lastResort.handle(record)
            return

        self._local.busy = True
        try:
            line = self.format(record) + self.terminator
            self.writer.write(line.encode(self.encoding, errors="backslashreplace"))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
        finally:
            self._local.busy = False

    def close(self) -> None:
        self.acquire()
        try:
            self.writer.close()
        finally:
            self.release()
            super().close()


def create_rotating_handler(
    log_file: str,
    max_size: int | str = "10m",
    max_backups: int = 5,
) -> RotatingLogHandler:
    """Create a rotating file handler.

    Args:
        log_file: Path to log file.
        max_size: Max file size before rotation (e.g. "10m").
        max_backups: Number of archives to keep.

    Returns:
        Configured RotatingLogHandler.
    """
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    writer = LogWriter(path, max_size=max_size, max_backups=max_backups)
    return RotatingLogHandler(writer)
