import io

import pytest

from dirjump.entry import Entry
from dirjump.scan import (
    add_new_visits,
    config_result,
    path_exists,
    scan_and_write_dirs,
    scan_config,
    update_visit,
)


def test_path_exists(tmp_path):
    visits = tmp_path / "test_visits.txt"
    visits.write_text("/home/user/dir1 1 100\n")
    assert path_exists(str(visits), "/home/user/dir1") is True
    assert path_exists(str(visits), "/home/user/dir2") is False


def test_path_exists_missing_file(tmp_path):
    assert path_exists(str(tmp_path / "absent.txt"), "/home/user/dir1") is False


def test_update_visit(tmp_path):
    visits = tmp_path / "test_visits.txt"
    visits.write_text("/home/user/dir1 1 100\n")

    update_visit("/home/user/dir1", 200, str(visits))
    update_visit("/home/user/dir2", 300, str(visits))

    assert visits.read_text() == "/home/user/dir1 2 200\n/home/user/dir2 1 300\n"
    assert not (tmp_path / "test_visits.txt_tmp").exists()


def test_update_visit_keeps_other_lines_and_drops_malformed(tmp_path):
    visits = tmp_path / "visits.txt"
    visits.write_text("/a 3 10\ngarbage\n/b 5 20\n")
    update_visit("/b", 99, str(visits))
    assert visits.read_text() == "/a 3 10\n/b 6 99\n"


def test_update_visit_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        update_visit("/a", 1, str(tmp_path / "missing.txt"))


def test_add_new_visits(tmp_path):
    visits = tmp_path / "test_add.txt"
    visits.write_text("/known/path 0 0\n")
    add_new_visits([Entry("/known/path"), Entry("/new/path")], str(visits))
    assert visits.read_text() == "/known/path 0 0\n/new/path 0 0\n"


def test_add_new_visits_creates_file(tmp_path):
    visits = tmp_path / "fresh.txt"
    add_new_visits([Entry("/a"), Entry("/b"), Entry("/a")], str(visits))
    assert visits.read_text() == "/a 0 0\n/b 0 0\n"


def test_scan_config_and_config_result(tmp_path):
    config = tmp_path / "test_config.txt"
    config.write_text("/match/path\n[comment]\n/other/path\n")
    conf = scan_config(str(config))
    assert len(conf) == 2
    assert conf == ["/match/path", "/other/path"]
    assert config_result(conf, "/match/path") is True
    assert config_result(conf, "/not/found") is False


def test_scan_config_missing_file(tmp_path):
    with pytest.raises(OSError):
        scan_config(str(tmp_path / "nope.conf"))


def test_scan_and_write_dirs(tmp_path):
    root = tmp_path / "test_dir"
    (root / "subdir").mkdir(parents=True)
    out = io.StringIO()
    scan_and_write_dirs(str(root), out)
    assert out.getvalue() == f"{root}/subdir 0 0\n"


def test_scan_and_write_dirs_nested_depth_first(tmp_path):
    root = tmp_path / "tree"
    (root / "a" / "b" / "c").mkdir(parents=True)
    (root / "a" / "file.txt").write_text("x")
    out = io.StringIO()
    scan_and_write_dirs(str(root), out)
    assert out.getvalue().splitlines() == [
        f"{root}/a 0 0",
        f"{root}/a/b 0 0",
        f"{root}/a/b/c 0 0",
    ]


def test_scan_and_write_dirs_trailing_slash(tmp_path):
    (tmp_path / "sub").mkdir()
    out = io.StringIO()
    scan_and_write_dirs(f"{tmp_path}/", out)
    assert out.getvalue() == f"{tmp_path}/sub 0 0\n"


def test_scan_and_write_dirs_missing_root(tmp_path):
    out = io.StringIO()
    scan_and_write_dirs(str(tmp_path / "missing"), out)
    assert out.getvalue() == ""


def test_scan_and_write_dirs_ignores_files(tmp_path):
    (tmp_path / "only_file").write_text("data")
    out = io.StringIO()
    scan_and_write_dirs(str(tmp_path), out)
    assert out.getvalue() == ""