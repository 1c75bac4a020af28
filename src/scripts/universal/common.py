import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def build_shared_parser():
    parser = argparse.ArgumentParser(description="Shared ZDB arguments. This should never be seen.", add_help=False)
    parser.add_argument("-o", "--output", type=str, help="The directory to write to. (The current directory by default.)")
    parser.add_argument("-e", "--error", action='store_true', required=False, help="Execution will stop on an error.")
    parser.add_argument("-v", "--verbose", action='store_true', required=False, help="Errors will be printed to the console.")
    parser.add_argument("-x", "-q", "--squelch", "--quiet", action='store_true', required=False, help="Nothing will be printed, unless -v/--verbose is specified.")
    return parser


SharedParser = build_shared_parser()


@dataclass
class PrintOptions:
    quiet: bool = False
    error_fail: bool = True
    verbose: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'PrintOptions':
        return cls(args.squelch, args.error, args.verbose)


def print_any(f: str, indent: int = 0, print_opts: PrintOptions = None):
    if not print_opts or not print_opts.quiet:
        indent = '\t' * indent
        print(f"{indent}{f}")


def print_reading(f: str, indent: int = 0, print_opts: PrintOptions = None):
    print_any(f"Reading \"{f}\"...", indent, print_opts)


def print_wrote(f: str, indent: int = 0, print_opts: PrintOptions = None):
    print_any(f"Wrote \"{f}\"...", indent, print_opts)


def print_error(e: BaseException, indent: int = 0, print_opts: PrintOptions = None):
    if not print_opts or not print_opts.quiet or print_opts.verbose:
        indent = '\t' * indent
        print(f"{indent}ERROR \"{e}\"...", file=sys.stderr)


def run_guarded(func: Callable[[], T], print_opts: PrintOptions = None, indent: int = 0) -> Optional[T]:
    """Run ``func``; unless errors are fatal (-e), report a failure and carry on with the next input."""
    try:
        return func()
    except KeyboardInterrupt:
        raise  # NEVER BLOCK KEYBOARD INTERRUPT
    except Exception as e:
        if not print_opts or print_opts.error_fail:
            raise
        print_error(e, indent, print_opts)
        return None


def func_print_help(arg_parser: argparse.ArgumentParser, exit_code: int = 0) -> Callable[[argparse.Namespace], None]:
    def wrapper(_: argparse.Namespace):
        arg_parser.print_help()
        sys.exit(exit_code)

    return wrapper
