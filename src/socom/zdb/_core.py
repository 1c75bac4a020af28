from __future__ import annotations

from dataclasses import dataclass, replace
from typing import BinaryIO, ClassVar

from serialization_tools.structx import Struct

from socom.zdb.errors import MalformedArchiveError

# Archive header: 152 template bytes, member count, entry stride
ARCHIVE_HEADER_SIZE = 160
MEMBER_COUNT_OFFSET = 152

# Entry header: size, path, pointer, size, reserved
ENTRY_HEADER_SIZE = 92
PATH_FIELD_SIZE = 64
PATH_MAX_BYTES = PATH_FIELD_SIZE - 1  # room for the terminator

ENTRY_TABLE_OFFSET = ARCHIVE_HEADER_SIZE


@dataclass
class ArchiveHeader:
    reserved: bytes
    member_count: int
    entry_stride: int

    LAYOUT: ClassVar[Struct] = Struct(f"< {MEMBER_COUNT_OFFSET}s 2L")

    @property
    def entry_table_size(self) -> int:
        return self.member_count * self.entry_stride

    def with_member_count(self, member_count: int) -> ArchiveHeader:
        return replace(self, member_count=member_count)

    @classmethod
    def unpack(cls, stream: BinaryIO) -> ArchiveHeader:
        buffer = stream.read(cls.LAYOUT.size)
        if len(buffer) != cls.LAYOUT.size:
            raise MalformedArchiveError(f"Archive header needs `{cls.LAYOUT.size}` bytes; only `{len(buffer)}` available!")
        reserved, member_count, entry_stride = cls.LAYOUT.unpack(buffer)
        return cls(reserved, member_count, entry_stride)

    def pack(self, stream: BinaryIO) -> int:
        return self.LAYOUT.pack_stream(stream, self.reserved, self.member_count, self.entry_stride)
