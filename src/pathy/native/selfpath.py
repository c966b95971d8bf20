"""Path of the running executable."""

import os
import sys

from .errors import PathyError, describe

PROC_SELF_EXE = "/proc/self/exe"


def get_my_name() -> str:
    if sys.platform.startswith("linux"):
        try:
            return os.readlink(PROC_SELF_EXE)
        except OSError as exc:
            raise PathyError(describe(exc)) from exc
    if not sys.executable:
        raise PathyError("cannot determine the path of the running executable")
    return sys.executable
