"""Fixed table of supported agents and their skills directories."""

from __future__ import annotations

from pathlib import PurePosixPath

AGENT_IDS: tuple[str, ...] = ("claude-code", "codex", "cursor", "windsurf")

AGENT_DISPLAY_NAMES: dict[str, str] = {
    "claude-code": "Claude Code",
    "codex": "Codex",
    "cursor": "Cursor",
    "windsurf": "Windsurf",
}

# Relative to the invoking user's home directory.
AGENT_SKILLS_SUBDIRS: dict[str, PurePosixPath] = {
    "claude-code": PurePosixPath(".claude/skills"),
    "codex": PurePosixPath(".codex/skills"),
    "cursor": PurePosixPath(".cursor/skills"),
    "windsurf": PurePosixPath(".windsurf/skills"),
}
