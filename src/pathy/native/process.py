"""
Process launcher.

start_program() forks a child whose standard input is the read end of a new
pipe, then duplicates the write end onto the caller's standard output. From
then on anything the caller prints goes to the child. wait_for_program()
closes standard output so the child sees end-of-input, then reaps it.

Descriptor 1 is process-wide state: only one program may be in flight, and
nothing else may be printed between start and wait.
"""

import os
import signal
import sys
from typing import Iterable, List, Optional, Sequence

from .errors import PathyError, describe

STDOUT_FD = 1
EXEC_FAILED_STATUS = 127

# Python ignores these; ignored dispositions survive exec.
_RESTORED_SIGNALS = ("SIGPIPE", "SIGXFSZ")

_DEBUG = bool(os.environ.get("PATHY_DEBUG", ""))


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[pathy] process: {msg}", file=sys.stderr)


def _check_argv(argv: Sequence[str]) -> List[str]:
    args = list(argv)
    if not args:
        raise PathyError("start_program: need at least the program name")
    for arg in args:
        if not isinstance(arg, str):
            raise PathyError(f"start_program: arguments must be strings, got {type(arg).__name__}")
    return args


def _close_all(fds: Iterable[int]) -> Optional[OSError]:
    """Close every fd, even if an earlier close fails. Returns the first error."""
    first = None
    for fd in fds:
        try:
            os.close(fd)
        except OSError as exc:
            if first is None:
                first = exc
    return first


def _reap(pid: int) -> None:
    """Wait for a child we are giving up on. Its status does not matter."""
    try:
        os.waitpid(pid, 0)
    except ChildProcessError as exc:
        _debug(f"pid {pid} already reaped: {describe(exc)}")


def _exec_child(argv: List[str], read_fd: int, write_fd: int) -> None:
    # Never returns: either exec succeeds or the child exits with 127.
    try:
        for name in _RESTORED_SIGNALS:
            sig = getattr(signal, name, None)
            if sig is not None:
                signal.signal(sig, signal.SIG_DFL)
        os.dup2(read_fd, 0)
        _close_all(fd for fd in (read_fd, write_fd) if fd != 0)
        os.execvp(argv[0], argv)
    finally:
        os._exit(EXEC_FAILED_STATUS)


def start_program(argv: Sequence[str], fd: int = STDOUT_FD) -> int:
    """
    Start argv[0] (searched on PATH) with argv as its argument vector.

    The child's standard input is fed by everything subsequently written to
    fd (standard output unless told otherwise). Returns the child's pid,
    which must be passed to wait_for_program() exactly once.
    """
    args = _check_argv(argv)
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PathyError(f"cannot create pipe: {describe(exc)}") from exc
    try:
        pid = os.fork()
    except OSError as exc:
        _close_all((read_fd, write_fd))
        raise PathyError(f"cannot start {args[0]}: {describe(exc)}") from exc
    if pid == 0:
        _exec_child(args, read_fd, write_fd)

    try:
        os.dup2(write_fd, fd)
    except OSError as exc:
        # Close our ends first so the child sees end-of-input and can exit.
        _close_all((read_fd, write_fd))
        _reap(pid)
        raise PathyError(f"cannot redirect fd {fd} to {args[0]}: {describe(exc)}") from exc

    # An end that landed on fd itself was replaced by dup2.
    close_error = _close_all(end for end in (read_fd, write_fd) if end != fd)
    if close_error is not None:
        _debug(f"closing pipe for pid {pid}: {describe(close_error)}")
    _debug(f"started {args[0]} as pid {pid}, fd {fd} feeds its stdin")
    return pid


def wait_for_program(pid: int, fd: int = STDOUT_FD) -> int:
    """Close fd (the child's input feed) and block until pid exits. Returns the raw wait status."""
    try:
        os.close(fd)
    except OSError as exc:
        raise PathyError(f"cannot close fd {fd}: {describe(exc)}") from exc
    try:
        _, status = os.waitpid(pid, 0)
    except OSError as exc:
        raise PathyError(f"cannot wait for process {pid}: {describe(exc)}") from exc
    _debug(f"pid {pid} exited with status {status:#x}")
    return status
