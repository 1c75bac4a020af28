from os import PathLike
from typing import Any, Optional, Union


class ZdbError(Exception):
    pass


class MismatchError(ZdbError):
    """A field held a value other than the one the format requires."""

    def __init__(self, name: str, received: Any = None, expected: Any = None):
        super().__init__(name, received, expected)
        self.name = name
        self.received = received
        self.expected = expected

    def __str__(self):
        msg = f"Unexpected {self.name}"
        if self.received is not None:
            msg += f"; got `{self.received}`"
        if self.expected is not None:
            msg += "," if self.received is not None else ";"
            msg += f" expected `{self.expected}`"
        return msg + "!"


class ArchiveIOError(ZdbError):
    """A filesystem operation failed while packing or extracting; the original ``OSError`` is chained."""

    def __init__(self, action: str, path: Union[str, PathLike], reason: Optional[str] = None):
        super().__init__(action, path, reason)
        self.action = action
        self.path = path
        self.reason = reason

    def __str__(self):
        msg = f"Failed to {self.action} `{self.path}`"
        reason = self.reason
        if reason is None and self.__cause__ is not None:
            reason = str(self.__cause__)
        if reason:
            msg += f"; {reason}"
        return msg + "!"


class MalformedArchiveError(ZdbError):
    pass


class EntryStrideMismatchError(MismatchError, MalformedArchiveError):
    def __init__(self, received: int = None, expected: int = None):
        super().__init__("Entry Stride", received, expected)


class EntrySizeMismatchError(MismatchError, MalformedArchiveError):
    def __init__(self, received: int = None, expected: int = None):
        super().__init__("Entry Header Size", received, expected)


class MemberSizeMismatchError(MismatchError):
    def __init__(self, path: str, received: int = None, expected: int = None):
        super().__init__(f"size of `{path}`", received, expected)
        self.path = path


class InvalidTemplateError(ZdbError):
    pass


class ArchiveTooLargeError(ZdbError):
    def __init__(self, size: int, limit: int):
        super().__init__(size, limit)
        self.size = size
        self.limit = limit

    def __str__(self):
        return f"Archive would be `{self.size}` bytes; pointers can only address `{self.limit}` bytes!"


class MemberPathError(ZdbError):
    def __init__(self, path: str, *args):
        super().__init__(path, *args)
        self.path = path


class PathTooLongError(MemberPathError):
    def __init__(self, path: str, size: int, limit: int):
        super().__init__(path, size, limit)
        self.size = size
        self.limit = limit

    def __str__(self):
        return f"Member path `{self.path}` is `{self.size}` bytes; at most `{self.limit}` bytes fit in an entry header!"


class UnsupportedPathEncodingError(MemberPathError):
    def __str__(self):
        return f"Member path {repr(self.path)} is not plain ASCII!"


class UnsafePathError(MemberPathError):
    def __str__(self):
        return f"Member path {repr(self.path)} escapes the output directory!"


__all__ = [
    "ZdbError",
    "MismatchError",
    "ArchiveIOError",
    "MalformedArchiveError",
    "EntryStrideMismatchError",
    "EntrySizeMismatchError",
    "MemberSizeMismatchError",
    "InvalidTemplateError",
    "ArchiveTooLargeError",
    "MemberPathError",
    "PathTooLongError",
    "UnsupportedPathEncodingError",
    "UnsafePathError",
]
