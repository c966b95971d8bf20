"""
Path list handling: reading the variable, cleaning entries, and scanning the
directories it names. Directory contents come from the native layer, so
unreadable entries simply contribute nothing.
"""

import os
import re
import shlex
from typing import Dict, List, Mapping, Optional, Sequence

from .native import hash_entries, iter_entries
from .schema import KnownPathVar

DEFAULT_VAR = "PATH"

KNOWN_PATH_VARS: List[KnownPathVar] = [
    KnownPathVar(name="CDPATH", subdirs=True),
    KnownPathVar(name="GEM_PATH", extensions=[".rb"]),
    KnownPathVar(name="PATH"),
    KnownPathVar(name="PYTHONPATH", subdirs=True, extensions=[".py", ".pyc"]),
]


def known_var(name: str) -> Optional[KnownPathVar]:
    for var in KNOWN_PATH_VARS:
        if var.name == name:
            return var
    return None


def raw_path_list(var: str = DEFAULT_VAR, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """Entries exactly as they appear in the variable, blanks included."""
    if environ is None:
        environ = os.environ
    return environ.get(var, "").split(os.pathsep)


def clean_path_entry(entry: str) -> str:
    if not entry:
        return entry
    cleaned = os.path.normpath(entry)
    while len(cleaned) > 1 and cleaned.endswith(os.sep):
        cleaned = cleaned[:-1]
    return cleaned


def clean_path_list(entries: Sequence[str]) -> List[str]:
    """Cleaned entries with later duplicates dropped."""
    out: List[str] = []
    seen = set()
    for entry in entries:
        cleaned = clean_path_entry(entry)
        if cleaned not in seen:
            out.append(cleaned)
            seen.add(cleaned)
    return out


def export_statement(var: str, entries: Sequence[str]) -> str:
    return f"export {var}={shlex.quote(os.pathsep.join(entries))}"


def key_matches(text: str, keys: Sequence[str]) -> bool:
    """True if any key (a case-insensitive regex) matches text. No keys matches everything."""
    if not keys:
        return True
    for key in keys:
        try:
            pattern = re.compile(key, re.IGNORECASE)
        except re.error as exc:
            raise ValueError(f"bad pattern {key!r}: {exc}") from exc
        if pattern.search(text):
            return True
    return False


def sort_case_insensitive(items: Sequence[str]) -> List[str]:
    return sorted(items, key=str.lower)


def _visible_names(dirpath: str) -> List[str]:
    # Same as a shell "*" glob: dot-files are skipped.
    return [name for name in iter_entries(dirpath) if not name.startswith(".")]


def path_files(entries: Sequence[str]) -> List[str]:
    """Full paths of every file in every directory of the list."""
    files: List[str] = []
    for dirpath in entries:
        if not dirpath:
            continue
        files.extend(os.path.join(dirpath, name) for name in _visible_names(dirpath))
    return sort_case_insensitive(files)


def path_names(entries: Sequence[str]) -> List[str]:
    names = set()
    for dirpath in entries:
        if dirpath:
            names.update(_visible_names(dirpath))
    return sorted(names)


def shadowed_names(entries: Sequence[str], keys: Sequence[str] = ()) -> Dict[str, List[str]]:
    """Names found in more than one directory, mapped to those directories in path order."""
    dirs_by_name: Dict[str, List[str]] = {}
    for dirpath in entries:
        if not dirpath:
            continue
        for name in _visible_names(dirpath):
            if key_matches(name, keys):
                dirs_by_name.setdefault(name, []).append(dirpath)
    return {name: dirs for name, dirs in dirs_by_name.items() if len(dirs) > 1}


def which(name: str, entries: Sequence[str]) -> Optional[str]:
    """First full path for name along the list, or None."""
    for dirpath in entries:
        if dirpath and name in hash_entries(dirpath):
            return os.path.join(dirpath, name)
    return None
