# src/main.py — v3
"""CLI entry point — pipe, archives, prune commands.

Usage:
    lumberjack pipe <file> [--max-size 10m] [--max-backups 5]
    lumberjack archives <file>
    lumberjack prune <file> --max-backups N
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from pydantic import ValidationError

from lumberjack.config.settings import ConfigurationError, Settings
from lumberjack.core.errors import LumberjackError, RotationFailed
from lumberjack.core.models import RotationConfig
from lumberjack.logging.context import set_service_context
from lumberjack.logging.logger import setup_logging
from lumberjack.rotation.pruner import list_archives, prune
from lumberjack.rotation.writer import LogWriter
from lumberjack.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, stdin: BinaryIO | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        settings = Settings()
    except (ConfigurationError, ValidationError) as exc:
        _setup_logging(args.verbose)
        logger.error("Invalid configuration: %s", exc)
        return 1

    _setup_logging(args.verbose, settings)

    try:
        return args.func(args, settings, stdin if stdin is not None else sys.stdin.buffer)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except (ConfigurationError, LumberjackError) as exc:
        logger.error("%s", exc)
        return 1
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="lumberjack",
        description=f"lumberjack v{__version__} — size-triggered log file rotator",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- pipe ---
    p_pipe = subparsers.add_parser(
        "pipe", help="Append stdin lines to a rotating log file",
    )
    p_pipe.add_argument(
        "file", type=Path, nargs="?", default=None,
        help="Live log file (default: LUMBERJACK_FILE_NAME)",
    )
    p_pipe.add_argument(
        "--max-size", default=None,
        help="Rotation threshold, bytes or <n><k|m|g> (default: LUMBERJACK_MAX_SIZE)",
    )
    p_pipe.add_argument(
        "--max-backups", type=int, default=None,
        help="Archives to keep (default: LUMBERJACK_MAX_BACKUPS)",
    )
    p_pipe.set_defaults(func=_cmd_pipe)

    # --- archives ---
    p_archives = subparsers.add_parser(
        "archives", help="List archives of a log file, newest first",
    )
    p_archives.add_argument("file", type=Path, nargs="?", default=None)
    p_archives.set_defaults(func=_cmd_archives)

    # --- prune ---
    p_prune = subparsers.add_parser(
        "prune", help="Delete all but the newest archives of a log file",
    )
    p_prune.add_argument("file", type=Path, nargs="?", default=None)
    p_prune.add_argument("--max-backups", type=int, default=None)
    p_prune.set_defaults(func=_cmd_prune)

    return parser


def _rotation_config(args: argparse.Namespace, settings: Settings) -> RotationConfig:
    """Merge command-line options over settings."""
    max_size = getattr(args, "max_size", None)
    if isinstance(max_size, str) and max_size.strip().isdigit():
        max_size = int(max_size)
    max_backups = getattr(args, "max_backups", None)
    return RotationConfig(
        target_path=args.file if args.file is not None else settings.file_name,
        max_size_bytes=max_size if max_size is not None else settings.max_size_value,
        max_backups=max_backups if max_backups is not None else settings.max_backups,
    )


def _cmd_pipe(args: argparse.Namespace, settings: Settings, stdin: BinaryIO) -> int:
    """Copy stdin to the live file line by line."""
    config = _rotation_config(args, settings)
    logger.info(
        "Writing stdin to %s (max_size=%d, max_backups=%d)",
        config.target_path, config.max_size_bytes, config.max_backups,
    )
    failures = 0
    with LogWriter.from_config(config) as writer:
        for line in stdin:
            try:
                writer.write(line)
            except RotationFailed as exc:
                failures += 1
                if not exc.record_written:
                    logger.error("Dropped line after failed rotation: %s", exc)
    logger.info("Done: %d rotation(s), %d failed", writer.rotations, failures)
    return 0


def _cmd_archives(args: argparse.Namespace, settings: Settings, stdin: BinaryIO) -> int:
    """Print archives newest first."""
    config = _rotation_config(args, settings)
    for entry in list_archives(config.directory, config.base, config.ext):
        print(f"{entry.timestamp.isoformat()}\t{entry.path}")
    return 0


def _cmd_prune(args: argparse.Namespace, settings: Settings, stdin: BinaryIO) -> int:
    """Prune archives once, printing what was removed."""
    config = _rotation_config(args, settings)
    removed = prune(config.directory, config.base, config.ext, config.max_backups)
    for path in removed:
        print(path)
    logger.info("Removed %d archive(s)", len(removed))
    return 0


def _setup_logging(verbose: bool, settings: Settings | None = None) -> None:
    """Configure CLI logging from settings; --verbose forces DEBUG."""
    level = settings.log_level if settings is not None else "INFO"
    log_format = settings.log_format if settings is not None else "text"
    setup_logging(level="DEBUG" if verbose else level, log_format=log_format)
    set_service_context(settings.log_service if settings is not None else "")


if __name__ == "__main__":
    sys.exit(main())
