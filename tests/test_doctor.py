"""Tests for the doctor checks."""

from pathy.doctor import examine
from pathy.schema import Diagnostics, EntryType, Severity


def _messages(report, entry):
    for e in report.entries:
        if e.entry == entry:
            return [p.message for p in e.problems]
    return []


def _healthy(path):
    return Diagnostics(type=EntryType.DIRECTORY, is_world_writable=False)


def test_clean_path_has_no_problems(path_dirs):
    report = examine("PATH", [str(d) for d in path_dirs])
    assert report.entries == []
    assert report.total == 0


def test_shape_problems():
    entries = ["/usr/bin", "", ".", "bin", "/usr/bin/"]
    report = examine("PATH", entries, diagnose=_healthy)
    assert _messages(report, "") == [
        "Blank entry (interpreted as current directory).",
        "Current directory is not the last path entry.",
    ]
    assert _messages(report, ".") == [
        "Current directory in path.",
        "Current directory is not the last path entry.",
    ]
    assert _messages(report, "bin") == ["Relative directory in path."]
    assert _messages(report, "/usr/bin/") == ["Duplicate entry."]
    assert report.total == 6


def test_current_directory_last_is_allowed():
    report = examine("PATH", ["/usr/bin", "."], diagnose=_healthy)
    assert _messages(report, ".") == ["Current directory in path."]


def test_blank_entry_is_not_statted():
    seen = []

    def diagnose(path):
        seen.append(path)
        return _healthy(path)

    examine("PATH", ["", "/bin"], diagnose=diagnose)
    assert seen == ["/bin"]


def test_filesystem_problems(tmp_path):
    missing = tmp_path / "missing"
    plain = tmp_path / "plain"
    plain.write_text("")
    open_dir = tmp_path / "open"
    open_dir.mkdir()
    open_dir.chmod(0o777)

    report = examine("PATH", [str(missing), str(plain), str(open_dir)])

    assert _messages(report, str(missing)) == ["Cannot access directory: No such file or directory."]
    assert _messages(report, str(plain)) == ["Not a directory (file)."]
    assert _messages(report, str(open_dir)) == ["Writable by everyone."]
    severities = {e.entry: [p.severity for p in e.problems] for e in report.entries}
    assert severities[str(missing)] == [Severity.STYLE]
    assert severities[str(open_dir)] == [Severity.SECURITY]


def test_report_keeps_path_order_and_index():
    report = examine("GEM_PATH", ["b", "/x", "a"], diagnose=_healthy)
    assert report.var == "GEM_PATH"
    assert [(e.index, e.entry) for e in report.entries] == [(0, "b"), (2, "a")]
