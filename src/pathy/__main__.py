"""
pathy entry point. Runs one command and turns native-layer failures into
"pathy: error: <message>" on stderr with exit status 1.

Commands that change the variable cannot touch the caller's environment, so
they write an export statement to fd 3, which the shell function installed by
`pathy activate` evals.
"""

import argparse
import os
import platform
import sys
from typing import Callable, Dict, List, Optional

from . import PROGNAME, __version__
from .cli import build_parser, command_names
from .doctor import examine
from .native import (
    PathyError,
    assert_fd3_is_pipe,
    get_directory_diagnostics,
    get_my_name,
    start_program,
    wait_for_program,
    write_to_fd3,
)
from .pathlist import (
    KNOWN_PATH_VARS,
    clean_path_list,
    export_statement,
    key_matches,
    path_files,
    path_names,
    raw_path_list,
    shadowed_names,
    which,
)
from .renderers import activate, doctor_report, make_env

_DEBUG = bool(os.environ.get("PATHY_DEBUG", ""))

_RED = "\033[31m"
_RESET = "\033[0m"


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[pathy] main: {msg}", file=sys.stderr)


def _clean_list(args: argparse.Namespace) -> List[str]:
    return clean_path_list(raw_path_list(args.var))


def _set_path_list(var: str, entries: List[str]) -> None:
    write_to_fd3(export_statement(var, clean_path_list(entries)) + "\n")


def _confirm(prompt: str, ask: Optional[Callable[[str], str]] = None) -> bool:
    if ask is None:
        ask = input
    while True:
        try:
            answer = ask(f"{prompt}? [yN] ").strip().lower()
        except EOFError:
            return False
        if answer in ("yes", "y"):
            return True
        if answer in ("no", "n", ""):
            return False


def _cmd_ls(args: argparse.Namespace) -> int:
    color = sys.stdout.isatty()
    for entry in raw_path_list(args.var):
        if not key_matches(entry, args.keys):
            continue
        diag = get_directory_diagnostics(entry)
        if diag.ok or not color:
            print(entry)
        else:
            print(f"{_RED}{entry}{_RESET}")
    return 0


def _cmd_ls_names(args: argparse.Namespace) -> int:
    for name in path_names(_clean_list(args)):
        if key_matches(name, args.keys):
            print(name)
    return 0


def _cmd_ls_files(args: argparse.Namespace) -> int:
    for path in path_files(_clean_list(args)):
        if key_matches(path, args.keys):
            print(path)
    return 0


def _cmd_run_files(args: argparse.Namespace) -> int:
    files = path_files(_clean_list(args))
    argv = [args.program] + list(args.program_args)
    sys.stdout.flush()
    pid = start_program(argv)
    try:
        for path in files:
            print(path)
        sys.stdout.flush()
    except BrokenPipeError:
        # The program stopped reading. Point stdout at devnull so the
        # remaining buffered output has somewhere to go.
        _debug(f"{args.program} closed its input early")
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        os.close(devnull)
        sys.stdout.flush()
    status = wait_for_program(pid)
    code = os.waitstatus_to_exitcode(status)
    if code < 0:
        raise PathyError(f"{args.program} killed by signal {-code}")
    if code != 0:
        raise PathyError(f"{args.program} exited with status {code}")
    return 0


def _cmd_put_first(args: argparse.Namespace) -> int:
    assert_fd3_is_pipe()
    _set_path_list(args.var, list(args.dirs) + raw_path_list(args.var))
    return 0


def _cmd_put_last(args: argparse.Namespace) -> int:
    assert_fd3_is_pipe()
    _set_path_list(args.var, raw_path_list(args.var) + list(args.dirs))
    return 0


def _cmd_rm(args: argparse.Namespace) -> int:
    assert_fd3_is_pipe()
    entries = _clean_list(args)
    if not any(entries):
        print("Path is empty")
        return 0
    print("Going through the path list in order. Answer 'y' (yes)")
    print("to the entries you want to remove. Default answer is no.")
    # Blank entries are never offered and always kept.
    kept = [e for e in entries if not (e and key_matches(e, args.keys) and _confirm(f"Remove {e}"))]
    _set_path_list(args.var, kept)
    return 0


def _cmd_which(args: argparse.Namespace) -> int:
    entries = _clean_list(args)
    missing = 0
    for name in args.names:
        found = which(name, entries)
        if found is None:
            missing += 1
        else:
            print(found)
    return 1 if missing else 0


def _cmd_shadow(args: argparse.Namespace) -> int:
    shadowed = shadowed_names(_clean_list(args), args.keys)
    for i, name in enumerate(sorted(shadowed)):
        if i:
            print()
        print(name)
        for dirpath in shadowed[name]:
            print("*", dirpath)
    return 0


def _cmd_doctor(args: argparse.Namespace) -> int:
    report = examine(args.var, raw_path_list(args.var))
    print(doctor_report.render(report, make_env()))
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    print(export_statement(args.var, _clean_list(args)))
    return 0


def _cmd_activate(args: argparse.Namespace) -> int:
    bin_command = [get_my_name(), "-m", "pathy"]
    print(activate.render(
        make_env(),
        bin_command,
        command_names(),
        [v.name for v in KNOWN_PATH_VARS],
    ))
    return 0


def _cmd_version(args: argparse.Namespace) -> int:
    print(f"{PROGNAME} {__version__} ({sys.platform}, Python {platform.python_version()})")
    return 0


COMMAND_FUNCS: Dict[str, Callable[[argparse.Namespace], int]] = {
    "ls": _cmd_ls,
    "ls-names": _cmd_ls_names,
    "ls-files": _cmd_ls_files,
    "run-files": _cmd_run_files,
    "put-first": _cmd_put_first,
    "put-last": _cmd_put_last,
    "rm": _cmd_rm,
    "which": _cmd_which,
    "shadow": _cmd_shadow,
    "doctor": _cmd_doctor,
    "export": _cmd_export,
    "activate": _cmd_activate,
    "version": _cmd_version,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1
    _debug(f"running {args.command} on {args.var}")
    try:
        return COMMAND_FUNCS[args.command](args)
    except (PathyError, ValueError) as exc:
        print(f"{PROGNAME}: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
