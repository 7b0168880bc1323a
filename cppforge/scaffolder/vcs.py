"""Git initialisation for freshly generated projects.

Runs ``git init``, ``git add -A`` and ``git commit`` inside the new project
directory.  Each step must succeed before the next one starts; a failing step
raises ``GitError`` and nothing is rolled back.
"""

from __future__ import annotations

from pathlib import Path

from cppforge.utils import run_command

from .errors import GitError


def initial_commit_message(name: str, kind: str) -> str:
    """Return the message used for the first commit of a generated project."""
    return f"Initial commit: {name} {kind} project"


async def _run_git(
    git: str,
    *args: str,
    cwd: str | Path,
    timeout: int = 60,
) -> str:
    """Run a git command and return its stdout.

    Raises GitError if git cannot be started or exits with a non-zero code.
    """
    cmd = [git, *args]
    cmd_str = " ".join(cmd)

    try:
        returncode, stdout, stderr = await run_command(cmd, cwd=cwd, timeout=timeout)
    except OSError as exc:
        raise GitError(
            f"Could not run '{git}': {exc}", command=cmd_str
        ) from exc

    if returncode != 0:
        raise GitError(
            f"Git command failed (exit {returncode}): {cmd_str}\n{stderr}",
            command=cmd_str,
            stderr=stderr,
        )
    return stdout


async def init_repository(
    path: str | Path, message: str, git: str = "git"
) -> None:
    """Initialise a repository at *path*, stage everything and commit it."""
    repo = Path(path)
    await _run_git(git, "init", cwd=repo)
    await _run_git(git, "add", "-A", cwd=repo)
    await _run_git(git, "commit", "-m", message, cwd=repo)
