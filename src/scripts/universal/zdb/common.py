import os
from os.path import join, splitext, isfile
from typing import Iterable, List

ZDB_EXTS = ["zdb"]


def is_zdb(input_file: str, exts: List[str] = None) -> bool:
    exts = exts if exts is not None else ZDB_EXTS
    _, x = splitext(input_file)
    x = x.lstrip(".").lower()  # Drop '.'
    return x in exts


def walk_archive_paths(input_path: str, recursive: bool = False, strict: bool = False) -> Iterable[str]:
    """Yield ``input_path`` if it is a file, otherwise the `.zdb` files inside it (top level unless recursive)."""
    if isfile(input_path):
        yield input_path
        return
    for root, folders, files in os.walk(input_path):
        if not recursive:
            folders[:] = []
        folders.sort()
        for file in sorted(files):
            if strict or is_zdb(file):
                yield join(root, file)
