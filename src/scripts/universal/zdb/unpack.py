import argparse
from os.path import basename, splitext
from pathlib import Path

from socom.zdb import extract
from scripts.universal.common import PrintOptions, print_any, print_reading, print_wrote, run_guarded
from scripts.universal.zdb.common import walk_archive_paths


def add_args(parser: argparse.ArgumentParser):
    parser.add_argument("input_path", nargs="+", type=str, help="The archive(s), or directories containing archives, to unpack.")
    parser.add_argument("-r", "--recursive", action='store_true', help="Recursively search directories for archives.")
    parser.add_argument("-s", "--strict", action='store_true', help="Treat every file in a directory as an archive, regardless of extension.")
    parser.add_argument("-u", "--unique", action="store_true", help="Include the archive name in the result path.")


def unpack_archive(in_path: str, out_path: str, print_opts: PrintOptions = None, prepend_archive_path: bool = False, indent_level: int = 0) -> int:
    out_path = Path(out_path)
    archive_name = splitext(basename(in_path))[0]
    if prepend_archive_path:
        out_path /= archive_name
    print_any(f"Unpacking \"{archive_name}\"...", indent_level, print_opts)
    written = extract(in_path, out_path)
    for relative_path in written:
        print_wrote(str(out_path / relative_path), indent_level + 1, print_opts)
    return len(written)


def run(args: argparse.Namespace):
    print_opts = PrintOptions.from_args(args)
    output = args.output or str(Path.cwd())
    total = 0
    for input_path in args.input_path:
        print_reading(input_path, print_opts=print_opts)
        for archive_path in walk_archive_paths(input_path, args.recursive, args.strict):
            written = run_guarded(lambda: unpack_archive(archive_path, output, print_opts, args.unique, indent_level=1), print_opts, indent=1)
            total += written or 0
    print_any(f"\tDone! Wrote {total} file(s).", print_opts=print_opts)
