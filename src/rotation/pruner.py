# src/rotation/pruner.py — v1
"""Retention pruning: keep the newest N archives of a log series, delete the rest.

The archive set is rebuilt from a directory scan on every call; there is no
index to invalidate when files are added or removed by other tools.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lumberjack.core.models import ArchiveEntry
from lumberjack.rotation.archive_namer import parse_timestamp

logger = logging.getLogger(__name__)


def list_archives(directory: str | Path, base: str, ext: str) -> list[ArchiveEntry]:
    """Return the archives of ``base``/``ext`` in ``directory``, newest first.

    Files whose name matches ``base-*ext`` but carries no parsable timestamp
    are not archives of this series and are left out. Equal timestamps are
    ordered by file name, descending.
    """
    root = Path(directory)
    if not root.is_dir():
        return []

    try:
        paths = list(root.iterdir())
    except OSError as e:
        logger.warning("Unable to list archives in %s: %s", root, e)
        return []

    entries: list[ArchiveEntry] = []
    for path in paths:
        ts = parse_timestamp(path.name, base, ext)
        if ts is None or not path.is_file():
            continue
        entries.append(ArchiveEntry(path=path, timestamp=ts))

    entries.sort(key=lambda e: (e.timestamp, e.name), reverse=True)
    return entries


def prune(directory: str | Path, base: str, ext: str, max_backups: int) -> list[Path]:
    """Delete all but the ``max_backups`` newest archives.

    Deletion is best-effort per file: a failure is logged and the remaining
    archives are still processed.

    Returns:
        Paths that were actually removed.
    """
    archives = list_archives(directory, base, ext)
    if len(archives) <= max_backups:
        return []

    removed: list[Path] = []
    for entry in archives[max_backups:]:
        try:
            entry.path.unlink()
        except FileNotFoundError:
            continue
        except OSError as e:
            logger.warning("Failed to remove expired archive %s: %s", entry.path, e)
            continue
        removed.append(entry.path)

    if removed:
        logger.debug(
            "Pruned %d archive(s) of %s%s in %s", len(removed), base, ext, directory,
        )
    return removed
