"""Shared pytest fixtures for building throwaway skills repositories."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

from linkskills.linker import resolve_agent
from linkskills.model import Agent

SkillFactory: TypeAlias = Callable[..., Path]


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at an empty directory under *tmp_path*."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def make_skill(tmp_path: Path) -> SkillFactory:
    """Return a factory creating ``<repo>/<name>`` with an optional SKILL.md."""
    default_repo = tmp_path / "Skills"

    def _make(name: str, *, marker: bool = True, repo: Path | None = None) -> Path:
        skill_dir = (repo or default_repo) / name
        skill_dir.mkdir(parents=True)
        if marker:
            (skill_dir / "SKILL.md").write_text(f"---\nname: {name}\n---\n# {name}\n", encoding="utf-8")
        return skill_dir

    default_repo.mkdir()
    return _make


@pytest.fixture
def skills_repo(tmp_path: Path, make_skill: SkillFactory) -> Path:
    """Repository with two skills, one hidden skill and one unmarked folder."""
    make_skill("alpha")
    make_skill("beta")
    make_skill(".hidden")
    make_skill("gamma", marker=False)
    return tmp_path / "Skills"


@pytest.fixture
def claude_agent(fake_home: Path) -> Agent:
    return resolve_agent("claude-code")
