import pytest

from dutils.linefile import DUtilsError, FileMode, LineFile


@pytest.fixture
def path(tmp_path):
    return tmp_path / "lines.txt"


def write(path, lines):
    with LineFile(path, FileMode.WRITE) as f:
        f.dump(lines)


def test_round_trip_keeps_blank_lines(path):
    lines = ["alpha", "", "gamma"]
    write(path, lines)
    with LineFile(path) as f:
        assert f.read_all() == lines


def test_iteration_and_eof(path):
    write(path, ["one", "two"])
    with LineFile(path) as f:
        assert list(f) == ["one", "two"]
        assert f.eof()
        assert f.read_line() == ""


def test_eof_on_empty_file(path):
    write(path, [])
    with LineFile(path) as f:
        assert f.eof()


def test_eof_does_not_consume(path):
    write(path, ["first", "second"])
    with LineFile(path) as f:
        assert not f.eof()
        assert not f.eof()
        assert f.read_line() == "first"


def test_discard_line(path):
    write(path, ["header", "body"])
    with LineFile(path) as f:
        f.discard_line()
        assert f.read_all() == ["body"]


def test_unterminated_last_line(path):
    path.write_text("x\ny", encoding="utf-8")
    with LineFile(path) as f:
        assert f.read_all() == ["x", "y"]


def test_append_mode(path):
    write(path, ["a"])
    with LineFile(path, FileMode.WRITE | FileMode.APPEND) as f:
        f.write_line("b")
    with LineFile(path) as f:
        assert f.read_all() == ["a", "b"]


def test_write_mode_truncates(path):
    write(path, ["old"])
    write(path, ["new"])
    with LineFile(path) as f:
        assert f.read_all() == ["new"]


def test_missing_file(tmp_path):
    with pytest.raises(DUtilsError, match="Cannot open"):
        LineFile(tmp_path / "missing.txt")


def test_invalid_mode(path):
    with pytest.raises(DUtilsError, match="Wrong access mode"):
        LineFile(path, FileMode(0))


def test_write_on_read_file(path):
    write(path, ["x"])
    with LineFile(path) as f:
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.write_line("y")


def test_read_on_write_file(path):
    with LineFile(path, FileMode.WRITE) as f:
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.read_line()
        with pytest.raises(DUtilsError, match="Wrong access mode"):
            f.eof()


def test_closed_file(path):
    write(path, ["x"])
    f = LineFile(path)
    f.close()
    assert f.eof()
    with pytest.raises(DUtilsError, match="File is not open"):
        f.read_line()