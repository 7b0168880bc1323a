"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Raised when project generation fails irrecoverably.

    Nothing created before the failure is removed; the user is expected to
    inspect the partial tree and clean it up by hand.
    """


class DestinationExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Destination already exists: {path}")


class GitError(ScaffoldError):
    """Raised when a git command fails or git cannot be executed."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)
