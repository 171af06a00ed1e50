"""Plain-text ``key = value`` configuration files with ``$(name)`` variables."""

from __future__ import annotations

import warnings

from dutils.linefile import DUtilsError, FileMode, LineFile
from dutils.strings import remove_from, replace_all, split, trim

_ANONYMOUS_PREFIX = "?"
_VARIABLE_CHAR = "$"


class ConfigFile:
    """A set of string entries read from, or written to, a text file.

    In read mode the file is parsed when opened. In write or append mode
    the entries are written out, sorted by key, when the file is closed.
    """

    def __init__(self, filename, mode: FileMode = FileMode.READ):
        mode = FileMode(mode)
        if not mode & (FileMode.READ | FileMode.WRITE):
            raise DUtilsError("Wrong access mode")
        self._data: dict[str, str] = {}
        self._unknowns = 0
        self._file = LineFile(filename, mode)
        self.mode = self._file.mode
        if FileMode.READ in self.mode:
            self._read_content()

    def close(self) -> None:
        """Write pending entries (in write modes) and close the file."""
        if not self._file.is_open:
            return
        if FileMode.WRITE in self.mode:
            for key in sorted(self._data):
                self._file.write_line(f"{key} = {self._data[key]}")
        self._file.close()

    def get(self, key: str, default: str | None = None) -> str | None:
        """Value stored under ``key``, or ``default``."""
        return self._data.get(key, default)

    def put(self, key: str, value) -> None:
        """Store ``value`` (as text) under ``key``."""
        self._data[key] = str(value)

    def keys(self) -> list[str]:
        """All keys in ascending order."""
        return sorted(self._data)

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value) -> None:
        self.put(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __enter__(self) -> ConfigFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _read_content(self) -> None:
        self._data.clear()
        self._unknowns = 0
        while not self._file.eof():
            line = trim(remove_from(self._file.read_line(), "#", "\\#"))
            tokens = split(line, "=", 1)
            if len(tokens) >= 2:
                key, value = trim(tokens[0]), trim(tokens[1])
                if len(value) > 1 and value[0] == '"' and value[-1] == '"':
                    value = value[1:-1]
                self.put(key, value)
            elif len(tokens) == 1:
                self.put(f"{_ANONYMOUS_PREFIX}{self._unknowns}", tokens[0])
                self._unknowns += 1
        self._resolve_variables()

    def _resolve_variables(self) -> None:
        for key in sorted(self._data):
            self._data[key] = self._resolve_value(self._data[key], {key})

    def _resolve_value(self, value: str, used: set[str]) -> str:
        replacements: list[tuple[str, str]] = []
        p = value.find(_VARIABLE_CHAR)
        while p != -1:
            if p + 1 < len(value) and value[p + 1] == "(":
                end = value.find(")", p + 2)
                if end != -1:
                    token = value[p + 2:end]
                    if token in used:
                        warnings.warn(
                            f'ConfigFile: circular dependency found: "{token}"',
                            stacklevel=2,
                        )
                    elif token not in self._data:
                        warnings.warn(
                            f'ConfigFile: token unknown: "{token}"', stacklevel=2
                        )
                    else:
                        resolved = self._resolve_value(
                            self._data[token], used | {token}
                        )
                        self._data[token] = resolved
                        replacements.append(
                            (f"{_VARIABLE_CHAR}({token})", resolved)
                        )
            p = value.find(_VARIABLE_CHAR, p + 1)
        return replace_all(value, replacements)