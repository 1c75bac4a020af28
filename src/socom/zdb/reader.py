from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike, SEEK_END
from os.path import splitext
from pathlib import Path, PurePosixPath
from typing import BinaryIO, Iterator, List, Optional, Union

from socom.zdb._core import ArchiveHeader, ENTRY_HEADER_SIZE, ENTRY_TABLE_OFFSET
from socom.zdb.entry import EntryHeader
from socom.zdb.errors import MalformedArchiveError, EntryStrideMismatchError, UnsafePathError
from socom.zdb.fs import FileSystem, LocalFileSystem, wrap_os_error

_SEPARATORS = re.compile(r"[\\/]")


@dataclass
class SocomFile:
    path: str
    size: int
    data: bytes = field(repr=False)
    extension: str = field(init=False)

    def __post_init__(self):
        self.extension = splitext(self.path.replace("\\", "/"))[1].lower().lstrip(".")


def _stream_size(stream: BinaryIO) -> int:
    now = stream.tell()
    size = stream.seek(0, SEEK_END)
    stream.seek(now)
    return size


def read_header(stream: BinaryIO) -> ArchiveHeader:
    stream.seek(0)
    header = ArchiveHeader.unpack(stream)
    if header.entry_stride != ENTRY_HEADER_SIZE:
        raise EntryStrideMismatchError(header.entry_stride, ENTRY_HEADER_SIZE)
    return header


def read_entries(stream: BinaryIO) -> List[EntryHeader]:
    """
    Parse the entry table and check that every payload lies inside the archive.

    :raises MalformedArchiveError: if the header, the table or any payload range runs past the end of the stream
    """
    archive_size = _stream_size(stream)
    header = read_header(stream)
    table_end = ENTRY_TABLE_OFFSET + header.entry_table_size
    if table_end > archive_size:
        raise MalformedArchiveError(f"Entry table for `{header.member_count}` members ends at `{table_end}`, past the end of the archive (`{archive_size}` bytes)!")

    stream.seek(ENTRY_TABLE_OFFSET)
    entries = [EntryHeader.unpack(stream) for _ in range(header.member_count)]
    for entry in entries:
        if entry.end > archive_size:
            raise MalformedArchiveError(f"Member `{entry.path}` spans `{entry.pointer}`-`{entry.end}`, past the end of the archive (`{archive_size}` bytes)!")
    return entries


def read_member(stream: BinaryIO, entry: EntryHeader) -> SocomFile:
    stream.seek(entry.pointer)
    data = stream.read(entry.size)
    if len(data) != entry.size:
        raise MalformedArchiveError(f"Member `{entry.path}` is truncated; read `{len(data)}` of `{entry.size}` bytes!")
    return SocomFile(entry.path, entry.size, data)


def iter_members(stream: BinaryIO) -> Iterator[SocomFile]:
    for entry in read_entries(stream):
        yield read_member(stream, entry)


def safe_relative_path(path: str) -> PurePosixPath:
    """
    Turn a stored member path into a relative path that stays inside the output directory.

    Either separator is accepted and leading separators are dropped.

    :raises UnsafePathError: for empty paths, ``..`` segments and drive or stream qualifiers
    """
    parts = [part for part in _SEPARATORS.split(path) if part and part != "."]
    if not parts:
        raise UnsafePathError(path)
    for part in parts:
        if part == ".." or ":" in part:
            raise UnsafePathError(path)
    return PurePosixPath(*parts)


def extract(archive_path: Union[str, PathLike], output_directory: Union[str, PathLike], fs: Optional[FileSystem] = None) -> List[str]:
    """
    Extract every member of an archive under ``output_directory``.

    A missing archive is a no-op. Existing files are never overwritten, so extracting twice writes nothing the second
    time. The whole entry table is validated before anything is written.

    :returns: Relative paths (``/`` separated) of the files written, in archive order.
    :raises MalformedArchiveError: if the archive structure is inconsistent
    :raises UnsafePathError: if any member path would escape ``output_directory``
    :raises ArchiveIOError: if reading the archive or writing a member fails
    """
    fs = fs if fs is not None else LocalFileSystem()
    archive_path = Path(archive_path)
    output = Path(output_directory)
    if not fs.file_exists(archive_path):
        return []

    written: List[str] = []
    with wrap_os_error("read", archive_path):
        with fs.open_read(archive_path) as stream:
            entries = read_entries(stream)
            targets = [safe_relative_path(entry.path) for entry in entries]
            for entry, relative in zip(entries, targets):
                destination = output.joinpath(*relative.parts)
                fs.create_directory_if_missing(destination.parent)
                if fs.file_exists(destination):
                    continue
                member = read_member(stream, entry)
                fs.write_all_bytes(destination, member.data)
                written.append(relative.as_posix())
    return written
