import json
import sys
from os import PathLike
from typing import List, TextIO, Union, Dict, Any

from socom.util.json_util import EnhancedJSONEncoder
from socom.zdb.entry import EntryHeader
from socom.zdb.fs import wrap_os_error
from socom.zdb.ordering import classify_member
from socom.zdb.reader import read_header, read_entries


def list_archive(archive_path: Union[str, PathLike]) -> List[EntryHeader]:
    with wrap_os_error("read", archive_path):
        with open(archive_path, "rb") as stream:
            return read_entries(stream)


def describe_archive(archive_path: Union[str, PathLike]) -> Dict[str, Any]:
    with wrap_os_error("read", archive_path):
        with open(archive_path, "rb") as stream:
            header = read_header(stream)
            entries = read_entries(stream)
    return {
        "header": header,
        "entries": [
            {"index": i, "tier": classify_member(entry.path).name, **vars(entry)}
            for i, entry in enumerate(entries)
        ]
    }


def dump_archive(archive_path: Union[str, PathLike], out: TextIO = None, indent: int = 4):
    out = out if out is not None else sys.stdout
    json.dump(describe_archive(archive_path), out, cls=EnhancedJSONEncoder, indent=indent)
    out.write("\n")
