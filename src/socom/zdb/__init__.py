from socom.zdb._core import ArchiveHeader
from socom.zdb.entry import EntryHeader, encode_entry_header, decode_entry_header
from socom.zdb.errors import ZdbError, ArchiveIOError, MalformedArchiveError, PathTooLongError, UnsupportedPathEncodingError, UnsafePathError, InvalidTemplateError
from socom.zdb.ordering import MemberTier, classify_member, order_members
from socom.zdb.reader import SocomFile, extract, read_entries, iter_members
from socom.zdb.template import HeaderTemplateStore
from socom.zdb.writer import pack

__all__ = [
    "ArchiveHeader",
    "EntryHeader",
    "encode_entry_header",
    "decode_entry_header",
    "MemberTier",
    "classify_member",
    "order_members",
    "SocomFile",
    "extract",
    "read_entries",
    "iter_members",
    "HeaderTemplateStore",
    "pack",
    "ZdbError",
    "ArchiveIOError",
    "MalformedArchiveError",
    "PathTooLongError",
    "UnsupportedPathEncodingError",
    "UnsafePathError",
    "InvalidTemplateError",
]
