# src/rotation/size_parser.py — v1
"""Parse human-readable size specifications ('5k', '1.5m', '2g') into bytes."""

from __future__ import annotations

import re

from lumberjack.core.errors import InvalidSizeSpec

_SIZE_RE = re.compile(r"^(\d+(?:\.\d+)?)([kmg])$", re.IGNORECASE)

MULTIPLIERS: dict[str, int] = {
    "k": 1024,
    "m": 1024**2,
    "g": 1024**3,
}


def parse_size(spec: int | str) -> int:
    """Return the byte count for ``spec``.

    Integers are returned unchanged. Strings must be a decimal coefficient
    followed by one of k, m or g (case-insensitive); fractional results are
    truncated to whole bytes.

    Raises:
        InvalidSizeSpec: If ``spec`` is not an int or a well-formed size string.
    """
    if isinstance(spec, bool):
        raise InvalidSizeSpec(spec, "booleans are not sizes")
    if isinstance(spec, int):
        return spec
    if not isinstance(spec, str):
        raise InvalidSizeSpec(spec, f"unsupported type {type(spec).__name__}")

    match = _SIZE_RE.match(spec.strip())
    if not match:
        raise InvalidSizeSpec(spec)

    coefficient = float(match.group(1))
    unit = match.group(2).lower()
    return int(coefficient * MULTIPLIERS[unit])
