"""Command-line argument parsing."""

import argparse
from typing import List, Optional, Tuple

from . import PROGNAME, __version__
from .pathlist import DEFAULT_VAR

# (name, help) in the order shown by --help and offered by shell completion.
COMMANDS: List[Tuple[str, str]] = [
    ("ls", "List path entries (in order from first to last)"),
    ("ls-names", "List all files in path (names only)"),
    ("ls-files", "List all files in path (full pathnames)"),
    ("run-files", "Run program, feeding it filenames on stdin"),
    ("put-first", "Add or move the given entries to the beginning of the path"),
    ("put-last", "Add or move the given entries to the end of the path"),
    ("rm", "Remove path entries (you'll be asked for each entry)"),
    ("which", "See which file matches first in path"),
    ("shadow", "Show name conflicts"),
    ("doctor", "Find potential path problems"),
    ("export", "Generate an export statement in shell syntax"),
    ("activate", 'Try this in your shell: eval "$(pathy activate)"'),
    ("version", "Show version information"),
]

_KEYED = ("ls", "ls-names", "ls-files", "rm", "shadow")


def command_names() -> List[str]:
    return [name for name, _ in COMMANDS]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGNAME,
        description=f"{PROGNAME} {__version__}: helping you work with PATH and similar environment variables.",
    )
    parser.add_argument(
        "-V", "--var",
        default=DEFAULT_VAR,
        metavar="VAR",
        help="Environment variable to work on (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    helps = dict(COMMANDS)
    for name in command_names():
        p = sub.add_parser(name, help=helps[name], description=helps[name])
        if name in _KEYED:
            p.add_argument("keys", nargs="*", metavar="KEY", help="Only entries matching one of these regexps")
    sub.choices["run-files"].add_argument("program", help="Program to run")
    sub.choices["run-files"].add_argument("program_args", nargs=argparse.REMAINDER, metavar="ARG")
    sub.choices["put-first"].add_argument("dirs", nargs="+", metavar="DIR")
    sub.choices["put-last"].add_argument("dirs", nargs="+", metavar="DIR")
    sub.choices["which"].add_argument("names", nargs="+", metavar="NAME")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
