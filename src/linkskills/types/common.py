"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

AgentId: TypeAlias = Literal["claude-code", "codex", "cursor", "windsurf"]
LinkStatus: TypeAlias = Literal[
    "linked",
    "already-linked",
    "conflicting-symlink",
    "directory-exists",
    "skipped-no-marker",
    "failed",
]
