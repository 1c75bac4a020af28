import argparse

from scripts.universal.common import func_print_help, SharedParser
from .dump import add_list_args, add_dump_args, run_list, run_dump
from .pack import add_args as add_pack_args, run as run_pack
from .unpack import add_args as add_unpack_args, run as run_unpack

ArgumentSubParser = argparse._SubParsersAction


def add_zdb_sub_commands(sub_parser: ArgumentSubParser):
    pack_parser = sub_parser.add_parser("pack", help="Packs a directory into `result.zdb`.", parents=[SharedParser])
    add_pack_args(pack_parser)
    pack_parser.set_defaults(func=run_pack)

    unpack_parser = sub_parser.add_parser("unpack", help="Unpacks ZDB archives; existing files are kept.", parents=[SharedParser])
    add_unpack_args(unpack_parser)
    unpack_parser.set_defaults(func=run_unpack)

    list_parser = sub_parser.add_parser("list", help="Lists the members of a ZDB archive.")
    add_list_args(list_parser)
    list_parser.set_defaults(func=run_list)

    dump_parser = sub_parser.add_parser("dump", help="Dumps a ZDB archive's header and entry table as JSON for debugging.")
    add_dump_args(dump_parser)
    dump_parser.set_defaults(func=run_dump)


def add_zdb(sub_parser: ArgumentSubParser):
    zdb_parser = sub_parser.add_parser("zdb", prog="zdb", help="Tools for ZDB archives.")
    zdb_parser.set_defaults(func=func_print_help(zdb_parser))

    zdb_subparsers = zdb_parser.add_subparsers(title="ZDB Tools", help="Tools for ZDB archives.")
    add_zdb_sub_commands(zdb_subparsers)
