import pytest

from dutils.binaryfile import BinaryFile
from dutils.linefile import DUtilsError, FileMode


@pytest.fixture
def path(tmp_path):
    return tmp_path / "data.bin"


def test_int_is_big_endian(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_int(1)
    assert path.read_bytes() == b"\x00\x00\x00\x01"


def test_double_wire_bytes(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_double(1.0)
    assert path.read_bytes() == b"\x3f\xf0" + b"\x00" * 6


def test_round_trip_all_types(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_char("A")
        f.write_int(-123456)
        f.write_float(1.5)
        f.write_double(-2.25)
    with BinaryFile(path) as f:
        assert f.read_char() == b"A"
        assert f.read_int() == -123456
        assert f.read_float() == 1.5
        assert f.read_double() == -2.25
        assert not f.eof()


def test_char_from_int_and_bytes(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_char(200)
        f.write_char(b"z")
    with BinaryFile(path) as f:
        assert f.read_char() == bytes([200])
        assert f.read_char() == b"z"


def test_append(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_int(7)
    with BinaryFile(path, FileMode.WRITE | FileMode.APPEND) as f:
        f.write_int(8)
    with BinaryFile(path) as f:
        assert [f.read_int(), f.read_int()] == [7, 8]


def test_bytes_read_and_discard(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_int(5)
        f.write_int(9)
    with BinaryFile(path) as f:
        f.discard_bytes(4)
        assert f.bytes_read() == 4
        assert f.read_int() == 9


def test_read_past_end(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        f.write_char(1)
    with BinaryFile(path) as f:
        with pytest.raises(EOFError):
            f.read_int()
        assert f.eof()


def test_discard_past_end_sets_eof(path):
    path.write_bytes(b"ab")
    with BinaryFile(path) as f:
        f.discard_bytes(10)
        assert f.eof()


def test_wrong_modes(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.read_int()
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.bytes_read()
    with BinaryFile(path) as f:
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.write_int(1)


def test_invalid_mode(path):
    with pytest.raises(DUtilsError, match="Wrong access mode"):
        BinaryFile(path, FileMode(0))


def test_missing_file(tmp_path):
    with pytest.raises(DUtilsError, match="Cannot open"):
        BinaryFile(tmp_path / "none.bin")


def test_closed_file(path):
    f = BinaryFile(path, FileMode.WRITE)
    f.close()
    assert f.eof()
    with pytest.raises(DUtilsError, match="File is not open"):
        f.write_int(1)


def test_char_out_of_range(path):
    with BinaryFile(path, FileMode.WRITE) as f:
        with pytest.raises(ValueError):
            f.write_char(300)