from os import PathLike
from pathlib import Path, PurePath
from typing import List, Optional, Sequence, Tuple, Union

from socom import config
from socom.zdb._core import ArchiveHeader
from socom.zdb._serializers import U32_MAX
from socom.zdb.entry import EntryHeader
from socom.zdb.errors import ArchiveIOError, ArchiveTooLargeError, MemberSizeMismatchError
from socom.zdb.fs import FileSystem, LocalFileSystem, wrap_os_error
from socom.zdb.ordering import order_members
from socom.zdb.template import HeaderTemplateStore, parse_template


def to_archive_path(relative_path: PurePath) -> str:
    return "\\".join(relative_path.parts)


def build_entry_table(members: Sequence[Tuple[str, int]], header_length: int) -> List[EntryHeader]:
    """
    Lay out the entry table for ``(path, size)`` members.

    Payloads follow the table back to back, in table order; each pointer is absolute.
    """
    table_size = len(members) * EntryHeader.LAYOUT.size
    running = header_length + table_size
    entries = []
    for path, size in members:
        entries.append(EntryHeader(path, running, size))
        running += size
    if running > U32_MAX:
        raise ArchiveTooLargeError(running, U32_MAX)
    return entries


def pack(source_directory: Union[str, PathLike], output_directory: Union[str, PathLike], template: Optional[bytes] = None, fs: Optional[FileSystem] = None) -> Path:
    """
    Pack every file under ``source_directory`` into ``output_directory/result.zdb``.

    An existing result is overwritten. Member paths are validated before the output is opened, so a bad path never
    leaves a partial archive behind; an I/O failure while writing does.

    :param source_directory: The directory to pack; members are named relative to it.
    :param output_directory: Where to write the archive; created if missing.
    :param template: Archive header prototype; the bundled template is used when omitted.
    :param fs: Filesystem access; the local filesystem when omitted.
    :returns: The path of the written archive.
    :raises ArchiveIOError: if the source is not a directory, or a read/write fails
    :raises PathTooLongError: if a member path does not fit in an entry header
    :raises UnsupportedPathEncodingError: if a member path is not ASCII
    """
    fs = fs if fs is not None else LocalFileSystem()
    source = Path(source_directory)
    output = Path(output_directory)
    if not fs.is_directory(source):
        raise ArchiveIOError("pack", source, "not a directory")

    template = template if template is not None else HeaderTemplateStore().load_template()
    header = parse_template(template)

    # A previous result inside the source tree is never a member of the next one
    archive_path = output / config.RESULT_FILE_NAME
    resolved_archive = archive_path.resolve()
    listed = [rel for rel in fs.list_files_recursive(source) if (source / rel).resolve() != resolved_archive]
    relative_paths = order_members(listed)
    members = [(to_archive_path(rel), fs.file_size(source / rel)) for rel in relative_paths]
    header = header.with_member_count(len(members))
    entries = build_entry_table(members, ArchiveHeader.LAYOUT.size)
    entry_buffers = [entry.to_bytes() for entry in entries]

    fs.create_directory_if_missing(output)
    with wrap_os_error("write", archive_path):
        with fs.open_write(archive_path) as handle:
            header.pack(handle)
            for buffer in entry_buffers:
                handle.write(buffer)
            for rel, entry in zip(relative_paths, entries):
                data = fs.read_all_bytes(source / rel)
                if len(data) != entry.size:
                    raise MemberSizeMismatchError(entry.path, len(data), entry.size)
                handle.write(data)
    return archive_path
