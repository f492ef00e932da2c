"""Configuration-related exceptions."""

from __future__ import annotations

from linkskills.exceptions.base import LinkSkillsError


class ConfigError(LinkSkillsError, ValueError):
    """Raised when a configuration file is invalid."""
