# src/rotation/archive_namer.py — v1
"""Archive naming convention for rotated log files.

A live file ``dir/base.ext`` rotated at time T becomes
``dir/base-YYYY-MM-DDTHH-MM-SS.mmmZ.ext``. Colons of the ISO-8601 time are
replaced by hyphens so the name is valid on every common filesystem, and the
timestamp can be recovered from the name alone.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path

_STAMP_RE = re.compile(
    r"(\d{4}-\d\d-\d\d)T(\d\d)-(\d\d)-(\d\d)(\.\d{3})?Z"
)


def split_base_ext(path: str | Path) -> tuple[str, str]:
    """Split a file name into (base, ext), ext keeping its leading dot."""
    p = Path(path)
    return p.stem, p.suffix


def _as_utc(ts: datetime) -> datetime:
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """Render ``ts`` as a filename-safe UTC stamp with millisecond precision."""
    iso = _as_utc(ts).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return iso.replace(":", "-")


def archive_name(base_path: str | Path, timestamp: datetime) -> Path:
    """Return the archive path for ``base_path`` rotated at ``timestamp``."""
    p = Path(base_path)
    base, ext = split_base_ext(p)
    return p.with_name(f"{base}-{format_timestamp(timestamp)}{ext}")


def parse_timestamp(file_name: str, base: str, ext: str) -> datetime | None:
    """Recover the rotation timestamp embedded in an archive file name.

    Returns None when the name does not belong to the ``base``/``ext`` series
    or its middle part is not a stamp in the exact form ``format_timestamp``
    writes. Hand-made names such as ``app-2024-05-01.log`` are not archives.
    """
    prefix = f"{base}-"
    if not file_name.startswith(prefix) or not file_name.endswith(ext):
        return None

    middle = file_name[len(prefix):len(file_name) - len(ext)]
    match = _STAMP_RE.fullmatch(middle)
    if match is None:
        return None

    date, hh, mm, ss, frac = match.groups()
    candidate = f"{date}T{hh}:{mm}:{ss}{frac or ''}+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    return _as_utc(parsed)
