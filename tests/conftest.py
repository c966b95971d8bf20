import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def spare_fd():
    """
    A writable descriptor the launcher can repurpose instead of stdout.
    Tests own it: wait_for_program() closes it, otherwise the test must.
    """
    return os.open(os.devnull, os.O_WRONLY)


@pytest.fixture
def run_python():
    """Run a snippet (or `-m pathy ...`) in a fresh interpreter that can import pathy."""
    def run(args, **kwargs):
        env = dict(kwargs.pop("env", None) or os.environ)
        env["PYTHONPATH"] = os.pathsep.join(p for p in (str(SRC_DIR), env.get("PYTHONPATH", "")) if p)
        return subprocess.run(
            [sys.executable] + list(args),
            capture_output=True,
            text=True,
            env=env,
            timeout=60,
            **kwargs,
        )
    return run


@pytest.fixture
def path_dirs(tmp_path):
    """Two bin directories with one name in common, plus a dot-file."""
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    for d, names in ((first, ["alpha", "Beta", "shared"]), (second, ["gamma", "shared"])):
        for name in names:
            (d / name).write_text("#!/bin/sh\n")
    (first / ".hidden").write_text("")
    return first, second
