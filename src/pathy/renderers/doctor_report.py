"""Doctor renderer: one block per problematic entry, then a total."""

from jinja2 import Environment

from ..schema import DoctorReport


def render(report: DoctorReport, env: Environment) -> str:
    return env.get_template("doctor.txt.j2").render(report=report).rstrip("\n")
