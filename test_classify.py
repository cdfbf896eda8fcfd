"""Tests for grammar classification of raw paths."""
# pylint: disable=missing-function-docstring

from pathlib import Path

import pytest
import yaml

from typed_path import PathType, TypedPath, TypedPathBuf, classify

CASES_FILE = Path(__file__).parent / "classification_cases.yaml"


def _load_cases():
    with open(CASES_FILE, encoding="utf-8") as f:
        return yaml.safe_load(f)


CASES = _load_cases()

SAMPLES = [case["path"].encode("utf-8") for case in CASES] + [
    b"\x00",
    b"\xff\xfe\xfd",
    bytes(range(256)),
    b"\\\xff\x00",
    b"C:\xff",
    b"/\x80/\x81",
]


# -----------------------------------------------------------------------
# Corpus
# -----------------------------------------------------------------------

class TestCorpus:
    """Every corpus entry classifies as recorded, from bytes and from str."""

    @pytest.mark.parametrize("case", CASES, ids=lambda c: c["path"] or "<empty>")
    def test_bytes(self, case):
        assert classify(case["path"].encode("utf-8")) is PathType(case["expected"])

    @pytest.mark.parametrize("case", CASES, ids=lambda c: c["path"] or "<empty>")
    def test_str(self, case):
        assert classify(case["path"]) is PathType(case["expected"])

    @pytest.mark.parametrize("case", CASES, ids=lambda c: c["path"] or "<empty>")
    def test_typed_path_agrees(self, case):
        path = TypedPath(case["path"])
        assert path.path_type is PathType(case["expected"])


# -----------------------------------------------------------------------
# Documented examples
# -----------------------------------------------------------------------

class TestExamples:
    """The canonical examples, written out as byte literals."""

    def test_absolute_unix(self):
        assert classify(b"/some/path/to/file.txt") is PathType.UNIX

    def test_drive_letter(self):
        assert classify(b"C:\\some\\path\\to\\file.txt") is PathType.WINDOWS

    def test_leading_backslash(self):
        assert classify(b"\\some\\path\\to\\file.txt") is PathType.WINDOWS

    def test_inner_backslashes_only(self):
        assert classify(b"some\\path\\to\\file.txt") is PathType.UNIX

    def test_empty(self):
        assert classify(b"") is PathType.UNIX

    def test_accepts_bytearray_and_memoryview(self):
        assert classify(bytearray(b"C:\\x")) is PathType.WINDOWS
        assert classify(memoryview(b"/x")) is PathType.UNIX


# -----------------------------------------------------------------------
# Totality and construction symmetry
# -----------------------------------------------------------------------

class TestTotality:
    """Classification never fails and borrowed/owned forms agree."""

    @pytest.mark.parametrize("data", SAMPLES)
    def test_exactly_one_variant(self, data):
        result = classify(data)
        assert (result is PathType.UNIX) != (result is PathType.WINDOWS)

    def test_binary_content(self):
        assert classify(bytes(range(256))) is PathType.UNIX
        assert classify(b"\\\xff\x00") is PathType.WINDOWS

    @pytest.mark.parametrize("data", SAMPLES)
    def test_owned_round_trip(self, data):
        assert TypedPathBuf(data).as_bytes() == data

    @pytest.mark.parametrize("data", SAMPLES)
    def test_borrowed_owned_symmetry(self, data):
        assert TypedPathBuf(data).as_path().path_type is classify(data)
        assert TypedPath(data).to_path_buf().as_path().path_type is classify(data)

    @pytest.mark.parametrize("data", SAMPLES)
    def test_reclassifying_bytes_is_stable(self, data):
        assert classify(TypedPathBuf(data).into_bytes()) is classify(data)

    def test_rejects_non_path_input(self):
        with pytest.raises(TypeError):
            classify(42)

    def test_fsdecode_strings_classify(self):
        assert classify("C:\\\udcff") is PathType.WINDOWS
        assert classify("/tmp/\udc80") is PathType.UNIX

    def test_unencodable_string_is_value_error(self):
        with pytest.raises(ValueError):
            classify("\ud800")
        with pytest.raises(ValueError):
            TypedPathBuf("/a/\ud800")
