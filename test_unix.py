"""Tests for the Unix path engine."""
# pylint: disable=missing-function-docstring

import platform

import pytest

from typed_path import (
    ComponentKind, InvalidUtf8Error, NativeConversionError, UnixEncoding,
    UnixPath, UnixPathBuf, Utf8UnixPath, Utf8UnixPathBuf,
)

ON_WINDOWS = platform.system() == "Windows"


def _names(data):
    return [c.as_bytes() for c in UnixPath(data).components()]


class TestComponents:
    """Lexical splitting on "/"."""

    def test_absolute(self):
        assert _names(b"/tmp/foo/../bar.txt") == [b"/", b"tmp", b"foo", b"..", b"bar.txt"]

    def test_leading_cur_dir_kept(self):
        assert _names(b"./a/./b/") == [b".", b"a", b"b"]

    def test_cur_dir_after_root_dropped(self):
        assert _names(b"/./a") == [b"/", b"a"]

    def test_repeated_separators(self):
        assert _names(b"//a///b") == [b"/", b"a", b"b"]

    def test_backslash_is_ordinary(self):
        assert _names(b"a\\b/c") == [b"a\\b", b"c"]

    def test_empty(self):
        assert not _names(b"")

    def test_no_prefix(self):
        assert not UnixPath(b"C:/x").components().has_prefix()

    def test_kinds(self):
        kinds = [c.kind for c in UnixPath(b"/..").components()]
        assert kinds == [ComponentKind.ROOT_DIR, ComponentKind.PARENT_DIR]


class TestQueries:
    """parent, file name, absolute."""

    def test_is_absolute(self):
        assert UnixPath(b"/a").is_absolute()
        assert UnixPath(b"a").is_relative()

    def test_parent(self):
        assert UnixPath(b"/a/b").parent() == UnixPath(b"/a")
        assert UnixPath(b"/a").parent() == UnixPath(b"/")
        assert UnixPath(b"foo").parent().as_bytes() == b""
        assert UnixPath(b"").parent() is None
        assert UnixPath(b"/").parent() is None

    def test_parent_keeps_original_spelling(self):
        assert UnixPath(b"a//b").parent().as_bytes() == b"a"

    def test_file_name(self):
        assert UnixPath(b"/a/b.txt").file_name() == b"b.txt"
        assert UnixPath(b"/a/b/.").file_name() == b"b"
        assert UnixPath(b"/a/..").file_name() is None

    def test_dot_file(self):
        path = UnixPath(b"/home/.bashrc")
        assert path.file_stem() == b".bashrc"
        assert path.extension() is None

    def test_starts_with(self):
        assert UnixPath(b"/a/b").starts_with(b"/a")
        assert not UnixPath(b"/a/bc").starts_with(b"/a/b")


class TestPush:
    """Joining relative and absolute paths."""

    def test_relative(self):
        path = UnixPathBuf(b"/a")
        path.push(b"b")
        assert path.as_bytes() == b"/a/b"

    def test_after_trailing_separator(self):
        path = UnixPathBuf(b"/")
        path.push(b"x")
        assert path.as_bytes() == b"/x"

    def test_absolute_replaces(self):
        path = UnixPathBuf(b"/a")
        path.push(b"/b")
        assert path.as_bytes() == b"/b"

    def test_onto_empty(self):
        path = UnixPathBuf()
        path.push(b"a")
        assert path.as_bytes() == b"a"

    def test_join(self):
        assert UnixPath(b"/a").join(b"b").as_bytes() == b"/a/b"


class TestStd:
    """Host path conversion."""

    def test_interior_nul_rejected(self):
        with pytest.raises(ValueError):
            UnixEncoding().to_std_str(b"a\x00b")

    @pytest.mark.skipif(ON_WINDOWS, reason="requires a Unix host")
    def test_to_std_path(self):
        assert str(UnixPath(b"/tmp/x").to_std_path()) == "/tmp/x"

    @pytest.mark.skipif(ON_WINDOWS, reason="requires a Unix host")
    def test_undecodable_bytes_survive(self):
        std = UnixPathBuf(b"/tmp/\xff").to_std_path()
        assert UnixPathBuf.from_std_path(std).as_bytes() == b"/tmp/\xff"

    @pytest.mark.skipif(ON_WINDOWS, reason="requires a Unix host")
    def test_to_std_path_buf(self):
        assert str(UnixPathBuf(b"/tmp/x").to_std_path_buf()) == "/tmp/x"

    @pytest.mark.skipif(ON_WINDOWS, reason="requires a Unix host")
    def test_to_std_path_buf_rejects_nul(self):
        with pytest.raises(NativeConversionError):
            UnixPathBuf(b"/tmp/\x00x").to_std_path_buf()

    @pytest.mark.skipif(not ON_WINDOWS, reason="requires a Windows host")
    def test_not_native_on_windows(self):
        with pytest.raises(NativeConversionError):
            UnixPath(b"/tmp").to_std_path()


class TestUtf8:
    """UTF-8 validated Unix paths."""

    def test_rejects_invalid(self):
        with pytest.raises(InvalidUtf8Error):
            Utf8UnixPath(b"/\xff")

    def test_invalid_utf8_is_value_error(self):
        with pytest.raises(ValueError):
            Utf8UnixPathBuf(b"\xc3")

    def test_as_str(self):
        path = Utf8UnixPath("/été")
        assert path.as_str() == "/été"
        assert [c.as_str() for c in path.components()] == ["/", "été"]

    def test_not_equal_to_byte_path(self):
        assert Utf8UnixPath("/a") != UnixPath(b"/a")

    def test_from_bytearray_validates(self):
        with pytest.raises(InvalidUtf8Error):
            Utf8UnixPathBuf.from_bytearray(bytearray(b"\xff"))
