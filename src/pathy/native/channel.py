"""fd 3 channel: the shell wrapper reads export statements from it and evals them."""

import os
import stat

from .errors import PathyError, describe

CHANNEL_FD = 3


def assert_fd3_is_pipe(fd: int = CHANNEL_FD) -> None:
    """Raise unless fd is open and refers to a pipe. Call once before any write."""
    try:
        st = os.fstat(fd)
    except OSError as exc:
        raise PathyError(f"fd {fd} is not a pipe") from exc
    if not stat.S_ISFIFO(st.st_mode):
        raise PathyError(f"fd {fd} is not a pipe")


def write_to_fd3(text: str, fd: int = CHANNEL_FD) -> None:
    """Write text in a single call. Short writes are errors, not retried."""
    data = text.encode("utf-8")
    try:
        n = os.write(fd, data)
    except OSError as exc:
        raise PathyError(f"cannot write to fd {fd}: {describe(exc)}") from exc
    if n != len(data):
        raise PathyError(f"cannot write more than {n} bytes to fd {fd}")
