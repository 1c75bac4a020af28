import argparse

from socom.zdb.dumper import list_archive, dump_archive


def add_list_args(parser: argparse.ArgumentParser):
    parser.add_argument("archive", type=str, help="The archive to list.")


def add_dump_args(parser: argparse.ArgumentParser):
    parser.add_argument("archive", type=str, help="The archive to dump.")
    parser.add_argument("--indent", type=int, default=4, help="JSON indentation. (4 by default.)")


def run_list(args: argparse.Namespace):
    entries = list_archive(args.archive)
    print(f"{args.archive}: {len(entries)} file(s)")
    for entry in entries:
        print(f"  {entry.pointer:>10}  {entry.size:>10}  {entry.path}")


def run_dump(args: argparse.Namespace):
    dump_archive(args.archive, indent=args.indent)
