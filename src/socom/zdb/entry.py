from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import BinaryIO, ClassVar

from serialization_tools.structx import Struct

from socom.zdb._core import ENTRY_HEADER_SIZE, PATH_FIELD_SIZE, PATH_MAX_BYTES
from socom.zdb._serializers import encode_path_ascii, decode_cstring, U32_MAX, BytesLike
from socom.zdb.errors import PathTooLongError, MalformedArchiveError, EntrySizeMismatchError


def _check_u32(name: str, value: int):
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"Entry {name} `{value}` does not fit in an unsigned 32-bit field!")


def encode_path_field(path: str) -> bytes:
    encoded = encode_path_ascii(path)
    if len(encoded) > PATH_MAX_BYTES:
        raise PathTooLongError(path, len(encoded), PATH_MAX_BYTES)
    return encoded


@dataclass
class EntryHeader:
    """
    One fixed size record of the entry table.

    ``pointer`` is absolute (from the start of the archive), not relative to the payload region.
    """
    path: str
    pointer: int
    size: int

    # header size, path, pointer, size, reserved
    LAYOUT: ClassVar[Struct] = Struct(f"< L {PATH_FIELD_SIZE}s 2L 16s")

    @property
    def end(self) -> int:
        return self.pointer + self.size

    @classmethod
    def unpack(cls, stream: BinaryIO) -> EntryHeader:
        buffer = stream.read(cls.LAYOUT.size)
        if len(buffer) != cls.LAYOUT.size:
            raise MalformedArchiveError(f"Entry header needs `{cls.LAYOUT.size}` bytes; only `{len(buffer)}` available!")
        header_size, path, pointer, size, _ = cls.LAYOUT.unpack(buffer)
        if header_size != ENTRY_HEADER_SIZE:
            raise EntrySizeMismatchError(header_size, ENTRY_HEADER_SIZE)
        return cls(decode_cstring(path), pointer, size)

    def pack(self, stream: BinaryIO) -> int:
        path = encode_path_field(self.path)
        _check_u32("pointer", self.pointer)
        _check_u32("size", self.size)
        return self.LAYOUT.pack_stream(stream, ENTRY_HEADER_SIZE, path, self.pointer, self.size, b"")

    def to_bytes(self) -> bytes:
        with BytesIO() as stream:
            self.pack(stream)
            return stream.getvalue()


def encode_entry_header(path: str, pointer: int, size: int) -> bytes:
    return EntryHeader(path, pointer, size).to_bytes()


def decode_entry_header(buffer: BytesLike, base_offset: int = 0) -> EntryHeader:
    window = bytes(buffer[base_offset:base_offset + ENTRY_HEADER_SIZE])
    with BytesIO(window) as stream:
        return EntryHeader.unpack(stream)
