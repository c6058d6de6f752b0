"""Command-line front door for dirtree.

Parses the single-letter switches and root paths, falls back to persisted
defaults when no switch is given, then hands the roots to the driver. Usage
problems, help requests and fatal walk errors all leave through ``SystemExit``
with a failing status.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn, TextIO

from .config import load_default_options
from .errors import OUT_OF_MEMORY_MESSAGE, FatalError
from .report import run_roots
from .tree_model import DisplayOptions

MAX_ROOTS = 64
DEFAULT_ROOT = "."
SWITCHES = ("-t", "-s", "-v", "-h")

USAGE = (
    "Usage {prog} [-t] [-s] [-v] [-h] [path...]\n"
    "Gather information about directory trees. If no path is given, the current directory\n"
    "is analyzed.\n"
    "\n"
    "Options:\n"
    " -t        print the directory tree (default if no other option specified)\n"
    " -s        print summary of directories (total number of files, total file size, etc)\n"
    " -v        print detailed information for each file. Turns on tree view.\n"
    " -h        print this help\n"
    " path...   list of space-separated paths (max {max_roots}). Default is the current directory.\n"
)


def usage_text(prog: str) -> str:
    return USAGE.format(prog=prog, max_roots=MAX_ROOTS)


def exit_with_usage(prog: str, error: str | None = None) -> NoReturn:
    """Print an optional error plus usage to stderr and exit with status 1."""
    if error:
        sys.stderr.write(f"{error}\n\n")
    sys.stderr.write(usage_text(prog))
    raise SystemExit(1)


class _UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems with the dirtree usage text."""

    def error(self, message: str) -> NoReturn:
        exit_with_usage(self.prog, message)


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _UsageArgumentParser(prog=prog, add_help=False, allow_abbrev=False)
    parser.add_argument("-t", dest="tree", action="store_true")
    parser.add_argument("-s", dest="summary", action="store_true")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("paths", nargs="*")
    return parser


def check_switches(prog: str, argv: Sequence[str]) -> None:
    """Reject dash arguments other than the four exact switches, in order.

    ``-h`` exits as soon as it is reached; ``-``, ``--``, ``-1`` and combined
    forms such as ``-ts`` are unrecognized options, never root paths.
    """
    for arg in argv:
        if arg == "-h":
            exit_with_usage(prog)
        if arg.startswith("-") and arg not in SWITCHES:
            exit_with_usage(prog, f"Unrecognized option '{arg}'.")


def resolve_options(args: argparse.Namespace) -> DisplayOptions:
    """Build display options from the switches, else from persisted defaults.

    Any switch on the command line replaces the persisted defaults entirely.
    Tree view is the default when neither source sets a switch.
    """
    if args.tree or args.summary or args.verbose:
        tree, summary, verbose = args.tree, args.summary, args.verbose
    else:
        defaults = load_default_options()
        tree = defaults.get("tree", False)
        summary = defaults.get("summary", False)
        verbose = defaults.get("verbose", False)
    if not (tree or summary or verbose):
        tree = True
    return DisplayOptions(tree_view=tree, summary=summary, verbose=verbose)


def select_roots(paths: Sequence[str]) -> list[str]:
    """Keep at most ``MAX_ROOTS`` roots, warning on stdout about the rest."""
    roots: list[str] = []
    for path in paths:
        if len(roots) < MAX_ROOTS:
            roots.append(path)
        else:
            sys.stdout.write(f"Warning: maximum number of directories exceeded, ignoring '{path}'.\n")
    return roots or [DEFAULT_ROOT]


def program_name() -> str:
    """Name shown in usage text; ``python -m dirtree`` reports ``dirtree``."""
    name = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else ""
    if not name or name == "__main__.py":
        return "dirtree"
    return name


def pass_through_undecodable_names(stream: TextIO) -> None:
    """Write undecodable filename bytes back out unchanged.

    ``os.scandir`` maps such bytes to lone surrogates; ``surrogateescape``
    turns them into the original bytes instead of failing mid-listing.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and list every requested root.

    ``argv`` defaults to ``sys.argv[1:]``; passing it explicitly is mainly
    for tests.
    """
    prog = program_name()
    raw_args = list(argv) if argv is not None else sys.argv[1:]
    check_switches(prog, raw_args)
    args = build_parser(prog).parse_intermixed_args(raw_args)

    options = resolve_options(args)
    pass_through_undecodable_names(sys.stdout)
    roots = select_roots(args.paths)
    try:
        run_roots(roots, options, sys.stdout)
    except FatalError as exc:
        sys.stdout.flush()
        raise SystemExit(str(exc)) from exc
    except MemoryError as exc:
        raise SystemExit(OUT_OF_MEMORY_MESSAGE) from exc


if __name__ == "__main__":
    main()
