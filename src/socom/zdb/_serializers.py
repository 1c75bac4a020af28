from typing import Union

from socom.zdb.errors import MalformedArchiveError, UnsupportedPathEncodingError

_U32_SIZE = 4
U32_MAX = 0xFFFFFFFF

BytesLike = Union[bytes, bytearray, memoryview]


def encode_u32(value: int) -> bytes:
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"`{value}` does not fit in an unsigned 32-bit field!")
    return value.to_bytes(_U32_SIZE, "little", signed=False)


def decode_u32(buffer: BytesLike, offset: int = 0) -> int:
    end = offset + _U32_SIZE
    if offset < 0 or end > len(buffer):
        raise MalformedArchiveError(f"Expected a 32-bit integer at `{offset}`, but the buffer ends at `{len(buffer)}`!")
    return int.from_bytes(bytes(buffer[offset:end]), "little", signed=False)


def encode_path_ascii(path: str) -> bytes:
    """
    Project a member path onto single-byte ASCII.

    NUL characters are dropped; anything outside 7-bit ASCII is rejected rather than guessed at.

    :raises UnsupportedPathEncodingError: if the path contains a non-ASCII character
    """
    try:
        encoded = path.encode("ascii")
    except UnicodeEncodeError as e:
        raise UnsupportedPathEncodingError(path) from e
    return encoded.replace(b"\0", b"")


def decode_cstring(buffer: BytesLike, offset: int = 0) -> str:
    """
    Read a NUL terminated ASCII string starting at ``offset``; the terminator is not included.

    :raises MalformedArchiveError: if no terminator is found before the buffer ends, or the bytes are not ASCII
    """
    buffer = bytes(buffer)
    if offset < 0 or offset > len(buffer):
        raise MalformedArchiveError(f"String offset `{offset}` is outside the buffer (`{len(buffer)}` bytes)!")
    end = buffer.find(b"\0", offset)
    if end == -1:
        raise MalformedArchiveError(f"String at `{offset}` is not terminated before the buffer ends!")
    try:
        return buffer[offset:end].decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedArchiveError(f"String at `{offset}` is not ASCII!") from e

