import os
from io import BytesIO
from pathlib import Path, PurePosixPath

import pytest

from socom.zdb import pack, extract, iter_members, read_entries, SocomFile
from socom.zdb.entry import EntryHeader
from socom.zdb.errors import MalformedArchiveError, EntryStrideMismatchError, UnsafePathError, ArchiveIOError
from socom.zdb.reader import safe_relative_path
from tests.helpers import write_tree, read_tree, lorem_ipsum
from tests.socom.zdb.datagen import SCENARIO_FILES, SCENARIO_BUFFER, gen_archive_buffer, gen_template

TREE = {
    "READERM.ZAR": b"manifest",
    "A.TXT": b"abc",
    "EMPTY.BIN": b"",
    "DATA/EN01LOC.ZAR": lorem_ipsum.encode("ascii"),
    "DATA/DEEP/NESTED/B.BIN": bytes(range(256)) * 4,
}


def _write_archive(tmp_path: Path, buffer: bytes) -> Path:
    path = tmp_path / "archive.zdb"
    path.write_bytes(buffer)
    return path


class TestRoundTrip:
    def test_tree(self, tmp_path: Path):
        archive = pack(write_tree(tmp_path / "src", TREE), tmp_path / "packed")
        extract(archive, tmp_path / "out")
        assert read_tree(tmp_path / "out") == TREE

    def test_scenario(self, tmp_path: Path):
        archive = _write_archive(tmp_path, SCENARIO_BUFFER)
        written = extract(archive, tmp_path / "out")
        assert written == ["READERM.ZAR", "A.TXT"]
        assert read_tree(tmp_path / "out") == SCENARIO_FILES


class TestIdempotence:
    def test_second_run_writes_nothing(self, tmp_path: Path):
        archive = pack(write_tree(tmp_path / "src", TREE), tmp_path / "packed")
        first = extract(archive, tmp_path / "out")
        snapshot = read_tree(tmp_path / "out")
        mtimes = {p: p.stat().st_mtime_ns for p in (tmp_path / "out").rglob("*")}
        second = extract(archive, tmp_path / "out")
        assert sorted(first) == sorted(TREE)
        assert second == []
        assert read_tree(tmp_path / "out") == snapshot
        assert {p: p.stat().st_mtime_ns for p in (tmp_path / "out").rglob("*")} == mtimes

    def test_existing_files_are_kept(self, tmp_path: Path):
        archive = _write_archive(tmp_path, SCENARIO_BUFFER)
        write_tree(tmp_path / "out", {"A.TXT": b"edited"})
        assert extract(archive, tmp_path / "out") == ["READERM.ZAR"]
        assert (tmp_path / "out" / "A.TXT").read_bytes() == b"edited"


def test_missing_archive_is_a_no_op(tmp_path: Path):
    assert extract(tmp_path / "nonexistent.zdb", tmp_path / "out") == []
    assert not (tmp_path / "out").exists()


def test_legacy_leading_separator(tmp_path: Path):
    archive = _write_archive(tmp_path, gen_archive_buffer([("\\DATA\\A.TXT", b"abc"), ("/B.TXT", b"b")]))
    assert extract(archive, tmp_path / "out") == ["DATA/A.TXT", "B.TXT"]
    assert read_tree(tmp_path / "out") == {"DATA/A.TXT": b"abc", "B.TXT": b"b"}


class TestMalformed:
    def test_short_header(self, tmp_path: Path):
        with pytest.raises(MalformedArchiveError):
            extract(_write_archive(tmp_path, gen_template()[:100]), tmp_path / "out")

    def test_stride(self, tmp_path: Path):
        archive = _write_archive(tmp_path, gen_archive_buffer([("A.TXT", b"abc")], stride=88))
        with pytest.raises(EntryStrideMismatchError):
            extract(archive, tmp_path / "out")

    def test_count_past_end(self, tmp_path: Path):
        buffer = bytearray(SCENARIO_BUFFER)
        buffer[152:156] = (3).to_bytes(4, "little")
        with pytest.raises(MalformedArchiveError):
            extract(_write_archive(tmp_path, bytes(buffer)), tmp_path / "out")

    def test_truncated_payload(self, tmp_path: Path):
        archive = _write_archive(tmp_path, SCENARIO_BUFFER[:-1])
        with pytest.raises(MalformedArchiveError):
            extract(archive, tmp_path / "out")
        # Validation happens before anything is written
        assert not (tmp_path / "out").exists()


@pytest.mark.parametrize("path", ["..\\EVIL.TXT", "DATA\\..\\..\\EVIL.TXT", "../EVIL.TXT", "C:\\EVIL.TXT", "", "\\", "."])
def test_unsafe_path(tmp_path: Path, path: str):
    archive = _write_archive(tmp_path, gen_archive_buffer([("A.TXT", b"abc"), (path, b"evil")]))
    with pytest.raises(UnsafePathError):
        extract(archive, tmp_path / "out" / "inner")
    assert not (tmp_path / "out").exists()
    assert not (tmp_path / "EVIL.TXT").exists()


@pytest.mark.parametrize(["path", "expected"], [
    ("A.TXT", PurePosixPath("A.TXT")),
    ("DATA\\A.TXT", PurePosixPath("DATA", "A.TXT")),
    ("\\DATA\\A.TXT", PurePosixPath("DATA", "A.TXT")),
    ("DATA/./A.TXT", PurePosixPath("DATA", "A.TXT")),
    ("DATA\\\\A.TXT", PurePosixPath("DATA", "A.TXT")),
])
def test_safe_relative_path(path: str, expected: PurePosixPath):
    assert safe_relative_path(path) == expected


class TestStreamReading:
    def test_read_entries(self):
        with BytesIO(SCENARIO_BUFFER) as stream:
            assert read_entries(stream) == [EntryHeader("READERM.ZAR", 344, 2), EntryHeader("A.TXT", 346, 3)]

    def test_iter_members(self):
        with BytesIO(SCENARIO_BUFFER) as stream:
            members = list(iter_members(stream))
        assert members == [SocomFile("READERM.ZAR", 2, b"rm"), SocomFile("A.TXT", 3, b"abc")]
        assert [member.extension for member in members] == ["zar", "txt"]


@pytest.mark.parametrize(["path", "extension"], [
    ("DATA\\READERM.ZAR", "zar"),
    ("Sounds/Intro.VAG", "vag"),
    ("NOEXT", ""),
    ("DIR.D\\NOEXT", ""),
])
def test_socom_file_extension(path: str, extension: str):
    assert SocomFile(path, 0, b"").extension == extension


@pytest.mark.skipif(os.name == "nt", reason="permission bits are not enforced")
def test_unwritable_output(tmp_path: Path):
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("root ignores permission bits")
    archive = _write_archive(tmp_path, SCENARIO_BUFFER)
    locked = tmp_path / "locked"
    locked.mkdir()
    locked.chmod(0o500)
    try:
        with pytest.raises(ArchiveIOError):
            extract(archive, locked)
    finally:
        locked.chmod(0o700)
