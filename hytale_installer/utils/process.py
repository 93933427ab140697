"""
Subprocess helpers.  Children share the installer's console: nothing is
captured, the caller just waits for the exit code.
"""

import subprocess
from typing import Optional


def split_args(args: Optional[str]) -> list[str]:
    """
    Split a configured argument string on single spaces.

    There is no quoting or escaping; empty tokens (from leading, trailing or
    doubled spaces) are dropped.
    """
    return [a for a in (args or "").split(" ") if a]


def run_inherited(cmd: list[str], cwd: str) -> int:
    """Run *cmd* with inherited stdio and return its exit code.

    OSError from spawning (command not found, not executable) propagates.
    """
    result = subprocess.run(cmd, cwd=cwd)
    return result.returncode


def spawn_inherited(cmd: list[str], cwd: str) -> subprocess.Popen:
    """Start *cmd* with inherited stdio without waiting for it."""
    return subprocess.Popen(cmd, cwd=cwd)
