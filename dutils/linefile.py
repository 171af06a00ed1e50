"""Line-oriented text files with explicit access modes."""

from __future__ import annotations

import enum
import os
from collections.abc import Iterable, Iterator


class FileMode(enum.IntFlag):
    """How a file is opened."""

    READ = 1
    WRITE = 2
    APPEND = 4


class DUtilsError(Exception):
    """Raised on misuse of the file helpers."""


def _resolve_mode(mode: FileMode) -> tuple[str, FileMode, str]:
    mode = FileMode(mode)
    if FileMode.READ in mode:
        return "r", FileMode.READ, "for reading"
    if FileMode.WRITE in mode and FileMode.APPEND in mode:
        return "a", FileMode.WRITE | FileMode.APPEND, "for writing at the end"
    if FileMode.WRITE in mode:
        return "w", FileMode.WRITE, "for writing"
    raise DUtilsError("Wrong access mode")


class LineFile:
    """Reads or writes a text file one line at a time."""

    def __init__(self, filename, mode: FileMode = FileMode.READ):
        flag, self.mode, purpose = _resolve_mode(mode)
        self._pending: str | None = None
        self._exhausted = False
        try:
            self._file = open(filename, flag, encoding="utf-8", newline="\n")
        except OSError as exc:
            raise DUtilsError(f"Cannot open {os.fspath(filename)} {purpose}") from exc

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def close(self) -> None:
        """Close the file; further reads or writes raise."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def _require(self, needed: FileMode) -> None:
        if self._file is None:
            raise DUtilsError("File is not open")
        if not needed & self.mode:
            raise DUtilsError("Wrong access mode")

    def _getline(self) -> str | None:
        if self._exhausted:
            return None
        line = self._file.readline()
        if not line:
            self._exhausted = True
            return None
        if line.endswith("\n"):
            return line[:-1]
        self._exhausted = True
        return line

    def eof(self) -> bool:
        """True when there is no line left to read."""
        if self._file is None:
            return True
        if FileMode.READ not in self.mode:
            raise DUtilsError("Wrong access mode")
        if self._pending is not None:
            return False
        self._pending = self._getline()
        return self._pending is None

    def read_line(self) -> str:
        """Return the next line without its newline, or ``""`` at the end."""
        self._require(FileMode.READ)
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        line = self._getline()
        return "" if line is None else line

    def read_all(self) -> list[str]:
        """Return every remaining line."""
        self._require(FileMode.READ)
        lines = []
        if self._pending is not None:
            lines.append(self._pending)
            self._pending = None
        while (line := self._getline()) is not None:
            lines.append(line)
        return lines

    def write_line(self, line: str) -> None:
        """Write ``line`` followed by a newline."""
        self._require(FileMode.WRITE)
        self._file.write(f"{line}\n")

    def dump(self, lines: Iterable[str]) -> None:
        """Write each of ``lines``."""
        self._require(FileMode.WRITE)
        for line in lines:
            self._file.write(f"{line}\n")

    def discard_line(self) -> None:
        """Skip the next line."""
        self.read_line()

    def __iter__(self) -> Iterator[str]:
        while not self.eof():
            yield self.read_line()

    def __enter__(self) -> LineFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()