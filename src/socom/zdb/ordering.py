import re
from enum import Enum
from os import PathLike
from pathlib import PureWindowsPath
from typing import Iterable, List, TypeVar, Union

MANIFEST_NAME = "READERM.ZAR"
LOCALIZED_ASSET_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}LOC\.ZAR")

TPath = TypeVar("TPath", bound=Union[str, PathLike])


class MemberTier(int, Enum):
    Manifest = 0
    LocalizedAsset = 1
    Regular = 2


def member_file_name(path: Union[str, PathLike]) -> str:
    # Windows paths split on both separators
    return PureWindowsPath(str(path)).name


def classify_member(path: Union[str, PathLike]) -> MemberTier:
    name = member_file_name(path)
    if name == MANIFEST_NAME:
        return MemberTier.Manifest
    elif LOCALIZED_ASSET_PATTERN.fullmatch(name):
        return MemberTier.LocalizedAsset
    else:
        return MemberTier.Regular


def order_members(paths: Iterable[TPath]) -> List[TPath]:
    """
    Order members for packing: the reader manifest first, localized asset archives next, everything else after.

    The sort is stable; members of the same tier keep the order they were discovered in.
    """
    return sorted(paths, key=classify_member)
