"""Developer entry points: ``kubeplan-test``, ``kubeplan-lint``, ``kubeplan-format``."""

import subprocess
import sys

SOURCE_DIRS = ["src", "tests"]


def _run(*cmd: str) -> int:
    print(f"Running {' '.join(cmd)}...")
    return subprocess.call(list(cmd))


def test():
    """Run the test suite; extra CLI args go straight to pytest."""
    sys.exit(_run("pytest", "tests", *sys.argv[1:]))


def lint():
    """Run ruff check and ruff format --check."""
    rc = _run("ruff", "check", *SOURCE_DIRS)
    if rc != 0:
        sys.exit(rc)
    sys.exit(_run("ruff", "format", "--check", *SOURCE_DIRS))


def format():
    """Format the source tree with ruff."""
    sys.exit(_run("ruff", "format", *SOURCE_DIRS))
