"""activate renderer: shell function that evals what pathy writes to fd 3."""

import shlex
from typing import Sequence

from jinja2 import Environment


def render(
    env: Environment,
    bin_command: Sequence[str],
    commands: Sequence[str],
    known_vars: Sequence[str],
) -> str:
    """
    bin_command is the argv that re-runs pathy. Each word is quoted on its
    own inside the _pathy_bin function, so paths with spaces survive.
    """
    template = env.get_template("activate.sh.j2")
    return template.render(
        bin=shlex.join(bin_command),
        commands=list(commands),
        known_vars=list(known_vars),
    ).rstrip("\n")
