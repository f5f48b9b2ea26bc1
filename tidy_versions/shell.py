"""Git utilities.

Thin wrapper around subprocess for reading tags from the current repository.
"""

from __future__ import annotations

import subprocess


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "describe", "--tags").
        check: If True (default), raise on non-zero exit. Set to False
               for commands that may legitimately fail (e.g., tag lookup).

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def latest_tag() -> str | None:
    """Return the most recent tag reachable from HEAD, or None."""
    return git("describe", "--tags", "--abbrev=0", check=False) or None
