"""Renderer output tests."""

import pytest
from jinja2 import Environment

from pathy.renderers import activate, doctor_report, make_env
from pathy.schema import DoctorReport, EntryReport, Problem, Severity


@pytest.fixture
def env() -> Environment:
    return make_env()


def _problem(msg, severity=Severity.SECURITY):
    return Problem(severity=severity, message=msg)


def test_doctor_no_problems(env):
    assert doctor_report.render(DoctorReport(var="PATH"), env) == "No problems found :)"


def test_doctor_one_problem(env):
    report = DoctorReport(var="PATH", entries=[
        EntryReport(index=0, entry="bin", problems=[_problem("Relative directory in path.")]),
    ])
    assert doctor_report.render(report, env) == (
        "Entry [bin]\n"
        "* [security] Relative directory in path.\n"
        "1 problem found"
    )


def test_doctor_many_problems(env):
    report = DoctorReport(var="PATH", entries=[
        EntryReport(index=1, entry="", problems=[
            _problem("Blank entry (interpreted as current directory)."),
            _problem("Current directory is not the last path entry."),
        ]),
        EntryReport(index=3, entry="/usr/bin", problems=[_problem("Duplicate entry.", Severity.STYLE)]),
    ])
    out = doctor_report.render(report, env)
    assert out.splitlines() == [
        "Entry []",
        "* [security] Blank entry (interpreted as current directory).",
        "* [security] Current directory is not the last path entry.",
        "Entry [/usr/bin]",
        "* [style] Duplicate entry.",
        "3 problems found",
    ]


def test_activate_snippet(env):
    out = activate.render(env, ["/usr/bin/python3", "-m", "pathy"], ["ls", "export"], ["PATH", "CDPATH"])
    lines = out.splitlines()
    assert lines[:3] == ["_pathy_bin() {", '    /usr/bin/python3 -m pathy "$@"', "}"]
    assert "pathy() {" in lines
    assert '    IFS= _pathy_fd3=$(_pathy_bin "$@" 3>&1 >&4) || return' in lines
    assert '    eval "$_pathy_fd3"' in lines
    assert 'compgen -W "ls export"' in out
    assert 'compgen -W "PATH CDPATH"' in out
    assert lines[-1] == "complete -o nospace -F _pathy_complete pathy"


def test_activate_quotes_each_word_of_the_command(env):
    out = activate.render(env, ["/opt/my tools/python3", "-m", "pathy"], ["ls"], ["PATH"])
    assert out.splitlines()[1] == "    '/opt/my tools/python3' -m pathy \"$@\""
