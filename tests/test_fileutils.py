from dutils.fileutils import (
    dir_exists,
    file_exists,
    file_name,
    file_parts,
    list_dir,
    make_dir,
    remove_dir,
    remove_file,
)


def test_make_dir_and_exists(tmp_path):
    target = tmp_path / "newdir"
    assert not dir_exists(target)
    make_dir(target)
    assert dir_exists(target)
    make_dir(target)
    assert dir_exists(target)


def test_file_exists_and_remove(tmp_path):
    f = tmp_path / "a.txt"
    assert not file_exists(f)
    f.write_text("x")
    assert file_exists(f)
    remove_file(f)
    assert not file_exists(f)


def test_list_dir_with_suffix_sorted(tmp_path):
    for name in ("b.txt", "a.txt", "c.dat"):
        (tmp_path / name).write_text("x")
    result = list_dir(tmp_path, ".txt", True)
    assert result == [f"{tmp_path}/a.txt", f"{tmp_path}/b.txt"]


def test_list_dir_without_suffix_lists_all(tmp_path):
    for name in ("one", "two"):
        (tmp_path / name).write_text("x")
    assert sorted(list_dir(tmp_path)) == [f"{tmp_path}/one", f"{tmp_path}/two"]


def test_list_dir_missing(tmp_path):
    assert list_dir(tmp_path / "missing", "") == []


def test_remove_dir(tmp_path):
    d = tmp_path / "d"
    make_dir(d)
    (d / "f1").write_text("x")
    (d / "f2").write_text("y")
    remove_dir(d)
    assert not dir_exists(d)


def test_file_name():
    assert file_name("a/b/c.txt") == "c.txt"
    assert file_name("a\\b\\c.txt") == "c.txt"
    assert file_name("plain") == "plain"


def test_file_parts():
    assert file_parts("dir/sub/name.tar.gz") == ("dir/sub", "name.tar", "gz")
    assert file_parts("name") == ("", "name", "")
    assert file_parts("c:\\data\\img.png") == ("c:\\data", "img", "png")