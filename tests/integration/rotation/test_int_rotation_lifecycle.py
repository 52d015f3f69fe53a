# tests/integration/rotation/test_int_rotation_lifecycle.py — v1
"""Integration tests for the rotation pipeline: writer → engine → pruner on a real filesystem.

No external services required — filesystem only, real clock.
"""

from __future__ import annotations

import time
from pathlib import Path

from lumberjack.rotation.archive_namer import parse_timestamp
from lumberjack.rotation.pruner import list_archives
from lumberjack.rotation.writer import LogWriter

MESSAGE = (
    "This is a rather long message. I don't want to have to write "
    "too many messages to get to the rollover limit\n"
)


class TestEndToEnd:
    def test_hundred_records_with_rotation_and_retention(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "test.log"
        record = MESSAGE.encode()
        assert 85 <= len(record) <= 110

        written: list[bytes] = []
        with LogWriter(log_file, max_size=5120, max_backups=2) as writer:
            for i in range(100):
                line = f"{i:03d} ".encode() + record
                writer.write(line)
                written.append(line)
                time.sleep(0.002)

        assert writer.rotations >= 1
        archives = list_archives(log_file.parent, "test", ".log")
        assert 1 <= len(archives) <= 2

        # Live file holds exactly the records written since the last rotation.
        live = log_file.read_bytes()
        assert 0 < len(live) < 5120 + len(written[-1])
        assert b"".join(written).endswith(live)
        first_live = int(live[:3])
        assert b"".join(written[first_live:]) == live

        # Newest archive ends right where the live file begins.
        newest = archives[0].path.read_bytes()
        assert b"".join(written[:first_live]).endswith(newest)
        assert len(newest) >= 5120

    def test_archives_are_distinct_and_parsable(self, tmp_path: Path):
        log_file = tmp_path / "svc.log"
        with LogWriter(log_file, max_size=64, max_backups=100) as writer:
            for _ in range(20):
                writer.write(b"x" * 64)

        assert writer.rotations == 19
        names = [p.name for p in tmp_path.iterdir() if p.name != "svc.log"]
        assert len(names) == len(set(names)) == 19
        for name in names:
            assert parse_timestamp(name, "svc", ".log") is not None
        total = sum(p.stat().st_size for p in tmp_path.iterdir())
        assert total == 20 * 64

    def test_restart_continues_existing_file(self, tmp_path: Path):
        log_file = tmp_path / "app.log"
        with LogWriter(log_file, max_size="1k", max_backups=3) as writer:
            writer.write(b"a" * 600)
        with LogWriter(log_file, max_size="1k", max_backups=3) as writer:
            writer.write(b"b" * 600)
            assert writer.rotations == 0
            writer.write(b"c")
            assert writer.rotations == 1
        assert log_file.read_bytes() == b"c"

    def test_foreign_files_survive_pruning(self, tmp_path: Path):
        log_file = tmp_path / "app.log"
        keep = [tmp_path / "app-manual-copy.log", tmp_path / "other.log", tmp_path / "app.txt"]
        for p in keep:
            p.write_bytes(b"keep")
        with LogWriter(log_file, max_size=10, max_backups=0) as writer:
            for _ in range(5):
                writer.write(b"y" * 10)
        assert all(p.exists() for p in keep)
        assert list_archives(tmp_path, "app", ".log") == []
