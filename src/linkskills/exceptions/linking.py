"""Exceptions that abort a linking run before or during setup."""

from __future__ import annotations

from pathlib import Path

from linkskills.exceptions.base import LinkSkillsError


class UsageError(LinkSkillsError):
    """Raised when command-line arguments are missing or invalid."""


class SourceNotFoundError(LinkSkillsError):
    """Raised when the skills repository path is not an existing directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Skills repository not found at: {path}")
        self.path = path


class TargetDirectoryError(LinkSkillsError):
    """Raised when the agent skills directory cannot be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot create skills directory {path}: {reason}")
        self.path = path
