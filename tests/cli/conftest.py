"""Fixtures for CLI tests.

CLI tests run `python .` from the project root in a subprocess, exactly as
a user would.
"""

import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def run_cli():
    """Run the CLI with the given arguments and return the completed process."""

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, ".", *[str(arg) for arg in args]],
            capture_output=True,
            text=True,
            cwd=PROJECT_ROOT,
            timeout=60,
        )

    return _run
