from typing import List, Tuple

HEADER_SIZE = 160
ENTRY_SIZE = 92


def uint(v: int) -> bytes:
    return v.to_bytes(4, "little", signed=False)


def encode_and_pad(v: str, byte_size: int, encoding: str = "ascii") -> bytes:
    v_enc = v.encode(encoding)
    v_pad = b"\0" * (byte_size - len(v_enc))
    return v_enc + v_pad


def gen_template(reserved: bytes = b"", member_count: int = 0, stride: int = ENTRY_SIZE) -> bytes:
    return reserved.ljust(152, b"\0") + uint(member_count) + uint(stride)


def gen_entry_header_buffer(path: str, pointer: int, size: int, header_size: int = ENTRY_SIZE) -> bytes:
    return uint(header_size) + encode_and_pad(path, 64) + uint(pointer) + uint(size) + b"\0" * 16


def gen_archive_buffer(members: List[Tuple[str, bytes]], reserved: bytes = b"", stride: int = ENTRY_SIZE) -> bytes:
    """Hand assembled archive: header, entry table, then payloads in table order."""
    buffer = gen_template(reserved, len(members), stride)
    pointer = HEADER_SIZE + len(members) * ENTRY_SIZE
    for path, data in members:
        buffer += gen_entry_header_buffer(path, pointer, len(data))
        pointer += len(data)
    for _, data in members:
        buffer += data
    return buffer


# Two member archive used across the reader/writer tests; the manifest must come first
SCENARIO_FILES = {"A.TXT": b"abc", "READERM.ZAR": b"rm"}
SCENARIO_BUFFER = gen_archive_buffer([("READERM.ZAR", b"rm"), ("A.TXT", b"abc")])
