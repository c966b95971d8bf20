"""
OS bindings used by the commands: process launch/wait, the fd 3 channel,
path classification and directory listing.

Every function here is synchronous. Routine conditions (a path that does not
exist, a directory that cannot be opened) come back as data; any other OS
failure raises PathyError after cleaning up descriptors and children.
"""

from .errors import PathyError
from .channel import assert_fd3_is_pipe, write_to_fd3
from .process import start_program, wait_for_program
from .prober import get_directory_diagnostics, hash_entries, iter_entries, list_entries
from .selfpath import get_my_name

__all__ = [
    "PathyError",
    "assert_fd3_is_pipe",
    "write_to_fd3",
    "start_program",
    "wait_for_program",
    "get_directory_diagnostics",
    "iter_entries",
    "list_entries",
    "hash_entries",
    "get_my_name",
]
