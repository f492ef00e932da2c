"""Shared exception hierarchy for linkskills."""

from __future__ import annotations

from .base import LinkSkillsError
from .config import ConfigError
from .linking import SourceNotFoundError, TargetDirectoryError, UsageError

__all__ = [
    "ConfigError",
    "LinkSkillsError",
    "SourceNotFoundError",
    "TargetDirectoryError",
    "UsageError",
]
