import argparse
import sys
from typing import List

from scripts.universal.zdb.zdb import add_zdb
from scripts.universal.common import func_print_help

ArgumentSubParser = argparse._SubParsersAction


def add_sub_commands(sub_parsers: ArgumentSubParser):
    add_zdb(sub_parsers)


def create_parser():
    socom_parser = argparse.ArgumentParser(prog="socom", description="Master tool for packing and unpacking SOCOM ZDB archives.")
    socom_parser.set_defaults(func=func_print_help(socom_parser))
    socom_subparsers = socom_parser.add_subparsers(description="Tools for SOCOM archives.", help="Tools for SOCOM archives.")
    add_sub_commands(socom_subparsers)

    return socom_parser


Parser = create_parser()


def main(args: List[str] = None):
    args = args if args is not None else sys.argv[1:]
    r = Parser.parse_args(args)
    if hasattr(r, 'func') and r.func:
        r.func(r)
    else:
        raise NotImplementedError("An entry point for the command was not supplied!")


if __name__ == "__main__":
    main()
