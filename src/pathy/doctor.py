"""
Doctor: find problems in the raw path list.

List-shape checks (duplicates, blanks, relative entries) only look at the
strings; the rest ask the native layer what each entry actually is.
"""

import os
import sys
from typing import Callable, List, Optional, Sequence

from .native import get_directory_diagnostics
from .pathlist import clean_path_entry
from .schema import Diagnostics, DoctorReport, EntryReport, EntryType, Problem, Severity

_DEBUG = bool(os.environ.get("PATHY_DEBUG", ""))


def _debug(msg: str) -> None:
    if _DEBUG:
        print(f"[pathy] doctor: {msg}", file=sys.stderr)


def _is_cwd(entry: str) -> bool:
    return entry == "" or clean_path_entry(entry) == os.curdir


def _shape_problems(index: int, entry: str, entries: Sequence[str], seen: set) -> List[Problem]:
    problems: List[Problem] = []
    key = clean_path_entry(entry)
    if key in seen:
        problems.append(Problem(severity=Severity.STYLE, message="Duplicate entry."))
    seen.add(key)
    if entry == "":
        problems.append(Problem(
            severity=Severity.SECURITY,
            message="Blank entry (interpreted as current directory).",
        ))
    elif key == os.curdir:
        problems.append(Problem(severity=Severity.SECURITY, message="Current directory in path."))
    elif not os.path.isabs(entry):
        problems.append(Problem(severity=Severity.SECURITY, message="Relative directory in path."))
    if _is_cwd(entry) and index != len(entries) - 1:
        problems.append(Problem(
            severity=Severity.SECURITY,
            message="Current directory is not the last path entry.",
        ))
    return problems


def _filesystem_problems(diag: Diagnostics) -> List[Problem]:
    if diag.error is not None:
        return [Problem(severity=Severity.STYLE, message=f"Cannot access directory: {diag.error}.")]
    problems: List[Problem] = []
    if diag.type != EntryType.DIRECTORY:
        problems.append(Problem(severity=Severity.STYLE, message=f"Not a directory ({diag.type.value})."))
    if diag.is_world_writable:
        problems.append(Problem(severity=Severity.SECURITY, message="Writable by everyone."))
    return problems


def examine(
    var: str,
    entries: Sequence[str],
    diagnose: Optional[Callable[[str], Diagnostics]] = None,
) -> DoctorReport:
    """Build a report listing every entry that has at least one problem."""
    if diagnose is None:
        diagnose = get_directory_diagnostics
    report = DoctorReport(var=var)
    seen: set = set()
    for index, entry in enumerate(entries):
        problems = _shape_problems(index, entry, entries, seen)
        if entry:
            diag = diagnose(entry)
            _debug(f"{entry}: {diag.model_dump(mode='json', exclude_none=True)}")
            problems.extend(_filesystem_problems(diag))
        if problems:
            report.entries.append(EntryReport(index=index, entry=entry, problems=problems))
    return report
