"""Configuration file keys."""

from __future__ import annotations

CONFIG_KEY_SKILLS_DIRS: str = "skills_dirs"
CONFIG_KEY_COLOR: str = "color"
CONFIG_ALLOWED_KEYS: frozenset[str] = frozenset({CONFIG_KEY_SKILLS_DIRS, CONFIG_KEY_COLOR})
