"""File system helpers."""

from __future__ import annotations

import contextlib
import os


def make_dir(path) -> None:
    """Create a directory; failures (e.g. it already exists) are ignored."""
    with contextlib.suppress(OSError):
        os.mkdir(path, 0o755)


def remove_dir(path) -> None:
    """Remove the files in a directory and then the directory itself.

    Failures are ignored, so a directory holding subdirectories is kept.
    """
    for entry in list_dir(path, ""):
        with contextlib.suppress(OSError):
            os.remove(entry)
    with contextlib.suppress(OSError):
        os.rmdir(path)


def remove_file(path) -> None:
    """Remove a file, ignoring failures."""
    with contextlib.suppress(OSError):
        os.remove(path)


def file_exists(filename) -> bool:
    """True if ``filename`` can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def dir_exists(path) -> bool:
    """True if ``path`` is a directory that can be listed."""
    try:
        with os.scandir(path):
            return True
    except OSError:
        return False


def list_dir(path, suffix: str = "", sorted_result: bool = False) -> list[str]:
    """Entries of ``path`` whose names end with ``suffix``, as ``path/name``."""
    path = os.fspath(path)
    try:
        names = os.listdir(path)
    except OSError:
        names = []
    result = [f"{path}/{name}" for name in names if name.endswith(suffix)]
    if sorted_result:
        result.sort()
    return result


def _last_separator(filepath: str) -> int:
    return max(filepath.rfind("/"), filepath.rfind("\\"))


def file_name(filepath: str) -> str:
    """The part of ``filepath`` after the last slash or backslash."""
    return filepath[_last_separator(filepath) + 1:]


def file_parts(filepath: str) -> tuple[str, str, str]:
    """Split ``filepath`` into (directory, name without extension, extension)."""
    p = _last_separator(filepath)
    if p == -1:
        path, filext = "", filepath
    else:
        path, filext = filepath[:p], filepath[p + 1:]
    dot = filext.rfind(".")
    if dot == -1:
        return path, filext, ""
    return path, filext[:dot], filext[dot + 1:]