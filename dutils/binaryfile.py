"""Binary files holding values in network (big-endian) byte order."""

from __future__ import annotations

import os
import struct

from dutils.linefile import DUtilsError, FileMode

_INT = struct.Struct(">i")
_UINT = struct.Struct(">I")
_FLOAT = struct.Struct(">f")
_DOUBLE = struct.Struct(">d")


class BinaryFile:
    """Reads or writes chars, 32-bit ints, floats and doubles in big-endian order."""

    def __init__(self, filename, mode: FileMode = FileMode.READ):
        mode = FileMode(mode)
        if FileMode.READ in mode:
            flag, self.mode, purpose = "rb", FileMode.READ, "for reading"
        elif FileMode.WRITE in mode and FileMode.APPEND in mode:
            flag, self.mode = "ab", FileMode.WRITE | FileMode.APPEND
            purpose = "for writing at the end"
        elif FileMode.WRITE in mode:
            flag, self.mode, purpose = "wb", FileMode.WRITE, "for writing"
        else:
            raise DUtilsError("Wrong access mode")
        self._eof = False
        try:
            self._file = open(filename, flag)
        except OSError as exc:
            raise DUtilsError(f"Cannot open {os.fspath(filename)} {purpose}") from exc

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def close(self) -> None:
        """Close the file."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def _require(self, needed: FileMode) -> None:
        if self._file is None:
            raise DUtilsError("File is not open")
        if not needed & self.mode:
            raise DUtilsError("Wrong access mode")

    def eof(self) -> bool:
        """True when closed or after a read went past the end."""
        return self._file is None or self._eof

    def _read_exact(self, count: int) -> bytes:
        self._require(FileMode.READ)
        data = self._file.read(count)
        if len(data) < count:
            self._eof = True
            raise EOFError(f"expected {count} bytes, got {len(data)}")
        return data

    def discard_bytes(self, count: int) -> None:
        """Skip up to ``count`` bytes."""
        self._require(FileMode.READ)
        if len(self._file.read(count)) < count:
            self._eof = True

    def bytes_read(self) -> int:
        """Current read position."""
        self._require(FileMode.READ)
        return self._file.tell()

    def write_char(self, value) -> None:
        """Write one byte, given as an int, a 1-byte bytes or a 1-char str."""
        self._require(FileMode.WRITE)
        if isinstance(value, str):
            value = value.encode("latin-1")
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 1:
                raise ValueError("a char is exactly one byte")
            data = bytes(value)
        else:
            if not -128 <= value <= 255:
                raise ValueError(f"char value out of range: {value}")
            data = bytes([value & 0xFF])
        self._file.write(data)

    def write_int(self, value: int) -> None:
        """Write a 32-bit integer."""
        self._require(FileMode.WRITE)
        if not -(2**31) <= value < 2**32:
            raise ValueError(f"int value out of range: {value}")
        self._file.write(_UINT.pack(value & 0xFFFFFFFF))

    def write_float(self, value: float) -> None:
        """Write a 32-bit float."""
        self._require(FileMode.WRITE)
        self._file.write(_FLOAT.pack(value))

    def write_double(self, value: float) -> None:
        """Write a 64-bit float."""
        self._require(FileMode.WRITE)
        self._file.write(_DOUBLE.pack(value))

    def read_char(self) -> bytes:
        """Read one byte."""
        return self._read_exact(1)

    def read_int(self) -> int:
        """Read a signed 32-bit integer."""
        return _INT.unpack(self._read_exact(4))[0]

    def read_float(self) -> float:
        """Read a 32-bit float."""
        return _FLOAT.unpack(self._read_exact(4))[0]

    def read_double(self) -> float:
        """Read a 64-bit float."""
        return _DOUBLE.unpack(self._read_exact(8))[0]

    def __enter__(self) -> BinaryFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()