"""Debugging helpers: process memory and byte-count formatting."""

from __future__ import annotations

import os


def memory_usage() -> int:
    """Total program size of this process in bytes, or 0 if unknown."""
    try:
        with open(f"/proc/{os.getpid()}/statm") as f:
            pages = int(f.read().split()[0])
        page_size = os.sysconf("SC_PAGE_SIZE")
    except (OSError, ValueError, IndexError, AttributeError):
        return 0
    if page_size == -1:
        return 0
    return pages * page_size


def format_bytes(num_bytes: int, factor: int = 1024) -> str:
    """Render a byte count as ``N B``, ``x KB``, ``x MB`` or ``x GB``."""
    if num_bytes < factor:
        return f"{num_bytes} B"
    suffixes = (" KB", " MB", " GB")
    f = float(factor)
    v = num_bytes / f
    i = 0
    while i < len(suffixes) - 1 and v >= f:
        v /= f
        i += 1
    return f"{v:g}{suffixes[i]}"