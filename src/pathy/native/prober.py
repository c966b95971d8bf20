"""
Path classification and directory listing.

Two error tiers: a path that is missing or unreachable in an ordinary way is
reported in Diagnostics.error, and a directory that cannot be opened lists as
empty. Anything else raises PathyError.
"""

import errno
import os
import stat
from typing import Dict, Iterator, List

from ..schema import Diagnostics, EntryType
from .errors import PathyError, describe

# stat() failures that describe the path rather than a broken environment.
EXPECTED_STAT_ERRNOS = frozenset({
    errno.EACCES,
    errno.ELOOP,
    errno.ENAMETOOLONG,
    errno.ENOENT,
    errno.ENOTDIR,
})

_TYPE_BY_FORMAT = {
    stat.S_IFIFO: EntryType.PIPE,
    stat.S_IFCHR: EntryType.DEVICE,
    stat.S_IFDIR: EntryType.DIRECTORY,
    stat.S_IFBLK: EntryType.DEVICE,
    stat.S_IFREG: EntryType.FILE,
    stat.S_IFLNK: EntryType.SYMBOLIC_LINK,
    stat.S_IFSOCK: EntryType.SOCKET,
}


def get_directory_diagnostics(dirpath: str) -> Diagnostics:
    """
    Classify dirpath by type and world-writability.

    Uses stat(), so a symlink is classified by its target and "symbolic link"
    does not come back in practice.
    """
    try:
        st = os.stat(dirpath)
    except OSError as exc:
        if exc.errno in EXPECTED_STAT_ERRNOS:
            return Diagnostics(error=os.strerror(exc.errno))
        raise PathyError(f"stat failed: {describe(exc)}") from exc
    entry_type = _TYPE_BY_FORMAT.get(stat.S_IFMT(st.st_mode), EntryType.UNKNOWN)
    return Diagnostics(
        type=entry_type,
        is_world_writable=bool(st.st_mode & stat.S_IWOTH),
    )


def iter_entries(dirpath: str) -> Iterator[str]:
    """
    Yield the names in dirpath in directory order, without "." and "..".

    A directory that cannot be opened yields nothing. A read error midway
    raises PathyError once the handle is closed.
    """
    try:
        handle = os.scandir(dirpath)
    except OSError:
        return
    with handle:
        try:
            for entry in handle:
                if entry.name in (".", ".."):
                    continue
                yield entry.name
        except OSError as exc:
            raise PathyError(f"cannot list directory {dirpath}: {describe(exc)}") from exc


def list_entries(dirpath: str) -> List[str]:
    return list(iter_entries(dirpath))


def hash_entries(dirpath: str) -> Dict[str, bool]:
    """Entry names as a membership table."""
    return {name: True for name in iter_entries(dirpath)}
