from io import BytesIO
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from socom import config
from socom.zdb._core import ArchiveHeader, ARCHIVE_HEADER_SIZE, ENTRY_HEADER_SIZE
from socom.zdb.errors import InvalidTemplateError, ArchiveIOError


def parse_template(template: bytes) -> ArchiveHeader:
    """
    Validate a header template and parse it.

    The template must be exactly 160 bytes and must already declare the entry stride. Legacy readers read the path of entry
    ``i`` at ``164 + i * stride``, taking its pointer and size 64 and 68 bytes after that. Those offsets only line up
    with the written table when the header is 160 bytes long (the extra 4 is the entry's own size field). Longer
    templates, some of which are described as "at least 164 bytes", would shift every entry and are rejected.

    :raises InvalidTemplateError: if the template has the wrong length or stride
    """
    if len(template) != ARCHIVE_HEADER_SIZE:
        raise InvalidTemplateError(f"Header template must be `{ARCHIVE_HEADER_SIZE}` bytes; got `{len(template)}`!")
    with BytesIO(template) as stream:
        header = ArchiveHeader.unpack(stream)
    if header.entry_stride != ENTRY_HEADER_SIZE:
        raise InvalidTemplateError(f"Header template declares an entry stride of `{header.entry_stride}`; expected `{ENTRY_HEADER_SIZE}`!")
    return header


class HeaderTemplateStore:
    """Loads the archive header prototype; the bundled `zdbHeader.bin` unless another file is given."""

    def __init__(self, path: Optional[Union[str, PathLike]] = None):
        self.path = Path(path) if path is not None else Path(config.default_template_path)

    def load_template(self) -> bytes:
        try:
            template = self.path.read_bytes()
        except OSError as e:
            raise ArchiveIOError("read header template", self.path) from e
        parse_template(template)
        return template

    def load_header(self) -> ArchiveHeader:
        return parse_template(self.load_template())
