"""Constants for skill candidate discovery."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
HIDDEN_NAME_PREFIX: str = "."
