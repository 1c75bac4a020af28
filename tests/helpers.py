from pathlib import Path
from typing import Dict, Union

TF = [True, False]

lorem_ipsum = "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor incididunt ut labore et dolore magna aliqua." \
              " Malesuada fames ac turpis egestas. Accumsan lacus vel facilisis volutpat est velit." \
              " Turpis egestas pretium aenean pharetra magna ac placerat vestibulum lectus. Tellus cras adipiscing enim eu turpis egestas."


def write_tree(root: Union[str, Path], files: Dict[str, bytes]) -> Path:
    """Create ``files`` (``/`` separated relative path -> content) under ``root``."""
    root = Path(root)
    for relative_path, data in files.items():
        path = root.joinpath(*relative_path.split("/"))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    return root


def read_tree(root: Union[str, Path]) -> Dict[str, bytes]:
    root = Path(root)
    return {path.relative_to(root).as_posix(): path.read_bytes() for path in root.rglob("*") if path.is_file()}
