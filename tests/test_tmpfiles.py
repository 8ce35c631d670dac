import threading

import pytest

from rustsense.tmpfiles import TmpDir, TmpFile, get_pos_and_source, tmpname


def test_tmpname_uses_thread_name():
    name = threading.current_thread().name.replace("::", "-")
    assert tmpname().endswith(name)


def test_tmpfile_round_trip_and_close():
    with TmpFile("fn main() {}") as f:
        path = f.path()
        assert path.name == tmpname()
        assert path.read_text(encoding="utf-8") == "fn main() {}"
    assert not path.exists()


def test_tmpdir_created_and_cleaned():
    d = TmpDir()
    path = d.path()
    assert path.is_dir()
    assert path.name.startswith(tmpname())
    d.cleanup()
    assert not path.exists()


def test_write_file_round_trip():
    with TmpDir() as d:
        f = d.write_file("src.rs", "let ä = 1;")
        assert f.path() == d.path() / "src.rs"
        assert f.path().read_bytes() == "let ä = 1;".encode("utf-8")
        f.close()
        assert not (d.path() / "src.rs").exists()


def test_write_file_twice_fails():
    with TmpDir() as d:
        first = d.write_file("src.rs", "a")
        with pytest.raises(FileExistsError):
            d.write_file("src.rs", "b")
        assert first.path().read_text() == "a"


def test_nested_dir_created_with_exact_name():
    with TmpDir() as d:
        nested = d.nested_dir("src")
        assert nested.path() == d.path() / "src"
        assert nested.path().is_dir()
        nested.cleanup()
        assert not (d.path() / "src").exists()


def test_nested_dir_existing_is_kept():
    with TmpDir() as d:
        (d.path() / "examples").mkdir()
        nested = d.nested_dir("examples")
        assert nested.path() == d.path() / "examples"
        nested.cleanup()
        assert (d.path() / "examples").is_dir()


def test_get_pos_and_source():
    assert get_pos_and_source("ab~c") == (2, "abc")


def test_get_pos_and_source_counts_bytes():
    pos, clean = get_pos_and_source("ä~x")
    assert clean == "äx"
    assert pos == len("ä".encode("utf-8"))


def test_get_pos_and_source_without_marker():
    with pytest.raises(ValueError):
        get_pos_and_source("no marker")