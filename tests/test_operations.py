from __future__ import annotations

import errno

import pytest

from fake_fs import (
    EntryNotFoundError,
    ErrorCode,
    FakeFileSystem,
    FakeFsError,
    IsADirError,
    NotADirError,
)


def test_stat_reports_size_and_times() -> None:
    fs = FakeFileSystem().file("a/b/c", b"12345", ctime=123)
    st = fs.stat_sync("a/b/c")
    assert st.ctime == 123
    assert st.size == 5
    assert fs.stat_sync("a").size is None


def test_stat_is_a_snapshot() -> None:
    fs = FakeFileSystem().dir("d").file("d/f", b"1", mtime=1)
    before = fs.stat_sync("d/f")
    fs.write_file_sync("d/f", b"123")
    fs.file("d/f", b"", mtime=2)
    assert before.size == 1
    assert before.mtime == 1
    assert fs.stat_sync("d/f").mtime == 2


def test_stat_missing_raises_enoent() -> None:
    fs = FakeFileSystem()
    with pytest.raises(EntryNotFoundError) as exc:
        fs.stat_sync("undefined")
    err = exc.value
    assert err.code == "ENOENT"
    assert err.errno == errno.ENOENT
    assert err.filename == "undefined"
    assert err.syscall == "stat"
    assert isinstance(err, FileNotFoundError)
    assert "No such file or directory" in str(err)


def test_stat_through_file_raises_enotdir() -> None:
    fs = FakeFileSystem().file("a.txt")
    with pytest.raises(NotADirError):
        fs.stat_sync("a.txt/b")


def test_readdir_lists_in_creation_order() -> None:
    fs = FakeFileSystem().dir("a").file("b.txt")
    assert fs.readdir_sync(".") == ["a", "b.txt"]
    assert fs.readdir_sync("") == ["a", "b.txt"]
    assert fs.readdir_sync("a") == []


def test_readdir_errors() -> None:
    fs = FakeFileSystem().file("a.txt")
    with pytest.raises(EntryNotFoundError):
        fs.readdir_sync("a")
    with pytest.raises(NotADirError) as exc:
        fs.readdir_sync("a.txt")
    assert exc.value.code == "ENOTDIR"
    assert isinstance(exc.value, NotADirectoryError)


def test_readdir_returns_a_copy() -> None:
    fs = FakeFileSystem().dir("a")
    names = fs.readdir_sync(".")
    names.append("bogus")
    assert fs.readdir_sync(".") == ["a"]


def test_exists_sync() -> None:
    fs = FakeFileSystem().file("a.txt")
    assert fs.exists_sync("a.txt") is True
    assert fs.exists_sync(".") is True
    assert fs.exists_sync("missing") is False
    assert fs.exists_sync("a.txt/b") is False


def test_read_file_returns_bytes_or_text() -> None:
    content = bytes([1, 2, 3])
    fs = FakeFileSystem().file("bin", content).file("file.txt", bytes([97]))
    assert fs.read_file_sync("bin") == content
    assert fs.read_file_sync("file.txt", "ascii") == "a"


def test_read_file_errors() -> None:
    fs = FakeFileSystem().dir("dir")
    with pytest.raises(EntryNotFoundError):
        fs.read_file_sync("foo")
    with pytest.raises(IsADirError) as exc:
        fs.read_file_sync("dir")
    assert exc.value.code == "EISDIR"
    assert isinstance(exc.value, IsADirectoryError)


def test_read_file_unknown_encoding() -> None:
    fs = FakeFileSystem().file("a.txt", "x")
    with pytest.raises(LookupError):
        fs.read_file_sync("a.txt", "klingon")


def test_write_file_creates_and_overwrites() -> None:
    fs = FakeFileSystem().dir("d").file("d/keep.txt", "v1", mtime=50)
    fs.write_file_sync("d/new.txt", "héllo")
    fs.write_file_sync("d/keep.txt", b"v2")
    assert fs.read_file_sync("d/new.txt", "utf8") == "héllo"
    assert fs.read_file_sync("d/keep.txt") == b"v2"
    # In-place writes keep the node's timestamps
    assert fs.stat_sync("d/keep.txt").mtime == 50
    assert fs.readdir_sync("d") == ["keep.txt", "new.txt"]


def test_write_file_errors() -> None:
    fs = FakeFileSystem().dir("d").file("f")
    with pytest.raises(EntryNotFoundError):
        fs.write_file_sync("missing/x", "data")
    with pytest.raises(IsADirError):
        fs.write_file_sync("d", "data")
    with pytest.raises(NotADirError):
        fs.write_file_sync("f/x", "data")
    assert fs.exists_sync("missing") is False


def test_error_codes_match_errno_names() -> None:
    assert ErrorCode.NOT_FOUND.value == "ENOENT"
    assert ErrorCode.NOT_A_DIRECTORY.errno == errno.ENOTDIR
    assert ErrorCode.IS_A_DIRECTORY.errno == errno.EISDIR
    for cls in (EntryNotFoundError, NotADirError, IsADirError):
        assert issubclass(cls, FakeFsError)
        assert issubclass(cls, OSError)


def test_stat_through_file_reports_enotdir_code() -> None:
    fs = FakeFileSystem().file("a.txt")
    with pytest.raises(NotADirError) as exc:
        fs.stat_sync("a.txt/b")
    assert exc.value.code == "ENOTDIR"
    assert exc.value.syscall == "stat"
