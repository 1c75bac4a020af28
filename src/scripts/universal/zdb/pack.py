import argparse
from pathlib import Path

from socom.zdb import pack, HeaderTemplateStore
from scripts.universal.common import PrintOptions, print_any, print_reading, print_wrote, run_guarded


def add_args(parser: argparse.ArgumentParser):
    parser.add_argument("input_path", type=str, help="The directory to pack.")
    parser.add_argument("-t", "--template", type=str, help="Archive header template to use instead of the bundled `zdbHeader.bin`.")


def pack_directory(in_path: str, out_path: str, template_path: str = None, print_opts: PrintOptions = None, indent_level: int = 0) -> Path:
    print_reading(in_path, indent_level, print_opts)
    template = HeaderTemplateStore(template_path).load_template()
    archive_path = pack(in_path, out_path, template)
    print_wrote(str(archive_path), indent_level + 1, print_opts)
    return archive_path


def run(args: argparse.Namespace):
    print_opts = PrintOptions.from_args(args)
    output = args.output or str(Path.cwd())
    if run_guarded(lambda: pack_directory(args.input_path, output, args.template, print_opts), print_opts) is not None:
        print_any("\tDone!", print_opts=print_opts)
