# src/rotation/factory.py — v1
"""Factory: instantiate a LogWriter from configuration."""

from __future__ import annotations

from lumberjack.config.settings import Settings
from lumberjack.rotation.engine import Clock
from lumberjack.rotation.writer import LogWriter


def create_log_writer(
    settings: Settings | None = None, *, clock: Clock | None = None
) -> LogWriter:
    """Create a LogWriter for the configured live file.

    Args:
        settings: Application settings. Defaults are loaded when None.
        clock: Optional rotation timestamp source.

    Returns:
        LogWriter instance; the file is opened on first write.

    Raises:
        InvalidConfig: If the settings describe an unusable rotation setup.
    """
    settings = settings or Settings()
    return LogWriter.from_config(settings.rotation_config(), clock=clock)
