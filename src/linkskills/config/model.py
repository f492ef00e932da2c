"""Config data model for linking runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class LinkerConfig:
    """Resolved linker config.

    ``skills_dirs`` relocates the skills directory of known agents only;
    ``color`` of ``None`` means "decide from the terminal".
    """

    skills_dirs: dict[str, Path] = field(default_factory=dict)
    color: bool | None = None
