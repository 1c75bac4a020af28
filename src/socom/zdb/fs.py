import os
from contextlib import contextmanager
from os import PathLike
from pathlib import Path, PurePath
from typing import BinaryIO, List, Union, Iterator, Protocol

from socom.zdb.errors import ArchiveIOError

StrOrPath = Union[str, PathLike]


@contextmanager
def wrap_os_error(action: str, path: StrOrPath) -> Iterator[None]:
    try:
        yield
    except ArchiveIOError:
        raise
    except OSError as e:
        raise ArchiveIOError(action, path) from e


class FileSystem(Protocol):
    def list_files_recursive(self, directory: StrOrPath) -> List[PurePath]:
        """Every regular file under ``directory``, relative to it, in traversal order."""
        ...

    def is_directory(self, path: StrOrPath) -> bool:
        ...

    def file_exists(self, path: StrOrPath) -> bool:
        ...

    def file_size(self, path: StrOrPath) -> int:
        ...

    def create_directory_if_missing(self, path: StrOrPath) -> None:
        ...

    def read_all_bytes(self, path: StrOrPath) -> bytes:
        ...

    def write_all_bytes(self, path: StrOrPath, data: bytes) -> None:
        ...

    def open_read(self, path: StrOrPath) -> BinaryIO:
        ...

    def open_write(self, path: StrOrPath) -> BinaryIO:
        ...


class LocalFileSystem(FileSystem):
    def list_files_recursive(self, directory: StrOrPath) -> List[PurePath]:
        root = Path(directory)
        found: List[PurePath] = []

        def raise_walk_error(e: OSError):
            raise e

        with wrap_os_error("list directory", root):
            for current, folders, files in os.walk(root, onerror=raise_walk_error):
                folders.sort()  # walk order is filesystem dependent otherwise
                for name in sorted(files):
                    path = Path(current, name)
                    if path.is_file():
                        found.append(path.relative_to(root))
        return found

    def is_directory(self, path: StrOrPath) -> bool:
        return os.path.isdir(path)

    def file_exists(self, path: StrOrPath) -> bool:
        return os.path.isfile(path)

    def file_size(self, path: StrOrPath) -> int:
        with wrap_os_error("stat", path):
            return os.path.getsize(path)

    def create_directory_if_missing(self, path: StrOrPath) -> None:
        with wrap_os_error("create directory", path):
            os.makedirs(path, exist_ok=True)

    def read_all_bytes(self, path: StrOrPath) -> bytes:
        with wrap_os_error("read", path):
            with open(path, "rb") as handle:
                return handle.read()

    def write_all_bytes(self, path: StrOrPath, data: bytes) -> None:
        with wrap_os_error("write", path):
            with open(path, "wb") as handle:
                handle.write(data)

    def open_read(self, path: StrOrPath) -> BinaryIO:
        with wrap_os_error("open", path):
            return open(path, "rb")

    def open_write(self, path: StrOrPath) -> BinaryIO:
        with wrap_os_error("create", path):
            return open(path, "wb")
