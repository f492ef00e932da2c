"""Root exception type."""

from __future__ import annotations


class LinkSkillsError(Exception):
    """Base class for all errors raised by linkskills."""
