from __future__ import annotations

import argparse
import io
import logging
import os
import re
import sys
from typing import IO

from .api import pick_file, pick_stream
from .errors import ParseError


log = logging.getLogger(__name__)

_EXAMPLES = """\
Filter stdin and print specific rows and columns, specifying them in
Python's slicing syntax, separating columns by whitespace.

If passed FILE, it will read the file twice but not buffer.

examples:
  cat myfile | getitem :5 0     # column 0 of the first 5 rows
  cat myfile | getitem 0 :      # the first row, all of it
  cat myfile | getitem -10 0:2  # first 2 columns of the 10th row from the end
  cat myfile | getitem -2:-1 :  # all fields of the second to last row
  cat myfile | getitem -1 -1    # last field of the last row
"""

# Positionals such as "-1", "-2:" or "-3:-1" start with "-" and would be
# taken for options.
_SPEC_RE = re.compile(r"-[-+0-9:]*")
_HELP = ("-h", "--help")
_FILE = ("-f", "--file")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="getitem",
        usage="%(prog)s [-h] [-v] [-f FILE] row_spec col_spec",
        description=_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    ap.add_argument("-h", "--help", action="store_true", help="show this help message and exit")
    ap.add_argument("-f", "--file", metavar="FILE", help="read FILE instead of stdin")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    ap.add_argument("row_spec", nargs="?", help="rows to keep, e.g. 3, -1, 2:5, -4:")
    ap.add_argument("col_spec", nargs="?", help="fields to keep in each row, same syntax")
    return ap


def _takes_file_value(arg: str) -> bool:
    """True when FILE is the next argument: "-f", "--file" or a cluster ending in f ("-vf")."""
    if arg in _FILE:
        return True
    if arg.startswith("--") or not arg.startswith("-"):
        return False
    flags = arg[1:]
    return flags.isalpha() and flags.find("f") == len(flags) - 1


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    opts: list[str] = []
    positionals: list[str] = []
    it = iter(argv)
    for arg in it:
        if arg == "--":
            positionals.extend(it)
            break
        if _takes_file_value(arg):
            opts.append(arg)
            value = next(it, None)
            if value is not None:
                opts.append(value)
            continue
        if not arg.startswith("-") or _SPEC_RE.fullmatch(arg):
            positionals.append(arg)
        else:
            opts.append(arg)
    return opts, positionals


def _strict_stdin() -> IO[str]:
    """stdin decoded as strict UTF-8, so undecodable bytes raise instead of passing through."""
    stdin = sys.stdin
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(encoding="utf-8", errors="strict")
    return stdin


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ap = _build_parser()
    opts, positionals = _split_argv(argv)

    if any(o in _HELP for o in opts):
        ap.print_help(sys.stdout)
        return 0

    args = ap.parse_args(opts + ["--"] + positionals if positionals else opts)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    if args.help:
        ap.print_help(sys.stdout)
        return 0

    if args.row_spec is None or args.col_spec is None:
        ap.print_help(sys.stdout)
        return 1

    try:
        if args.file is not None:
            out = pick_file(args.file, args.row_spec, args.col_spec)
        else:
            out = pick_stream(_strict_stdin(), args.row_spec, args.col_spec)
        for line in out:
            sys.stdout.write(line)
        sys.stdout.flush()
    except ParseError as e:
        print(f"getitem: error: {e}", file=sys.stderr)
        return 2
    except BrokenPipeError:
        # The reader went away (e.g. `| head`); stop quietly.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0
    except (OSError, UnicodeDecodeError) as e:
        log.debug("read failed", exc_info=True)
        print(f"getitem: error: {e}", file=sys.stderr)
        return 1
    return 0
