"""Tests for the per-candidate link decision procedure."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from linkskills.linker import link_candidate
from linkskills.model import SkillCandidate


@pytest.fixture
def skills_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "agent-skills"
    directory.mkdir()
    return directory


def _candidate(path: Path, *, has_marker: bool = True) -> SkillCandidate:
    return SkillCandidate(name=path.name, path=path, has_marker=has_marker)


def test_creates_symlink_when_slot_is_free(skills_repo: Path, skills_dir: Path) -> None:
    alpha = skills_repo / "alpha"

    outcome = link_candidate(_candidate(alpha), skills_dir)

    assert outcome.status == "linked"
    assert outcome.target == skills_dir / "alpha"
    assert outcome.target.is_symlink()
    assert Path(os.readlink(outcome.target)) == alpha
    assert (outcome.target / "SKILL.md").is_file()


def test_missing_marker_never_links(skills_repo: Path, skills_dir: Path) -> None:
    outcome = link_candidate(_candidate(skills_repo / "gamma", has_marker=False), skills_dir)

    assert outcome.status == "skipped-no-marker"
    assert not (skills_dir / "gamma").exists()
    assert not (skills_dir / "gamma").is_symlink()


def test_existing_correct_link_is_already_linked(skills_repo: Path, skills_dir: Path) -> None:
    alpha = skills_repo / "alpha"
    (skills_dir / "alpha").symlink_to(alpha, target_is_directory=True)

    outcome = link_candidate(_candidate(alpha), skills_dir)

    assert outcome.status == "already-linked"
    assert outcome.current == str(alpha)


def test_trailing_slash_link_counts_as_already_linked(skills_repo: Path, skills_dir: Path) -> None:
    alpha = skills_repo / "alpha"
    os.symlink(f"{alpha}/", skills_dir / "alpha")

    outcome = link_candidate(_candidate(alpha), skills_dir)

    assert outcome.status == "already-linked"


def test_relative_link_to_same_directory_counts_as_already_linked(skills_repo: Path, skills_dir: Path) -> None:
    alpha = skills_repo / "alpha"
    os.symlink(os.path.relpath(alpha, skills_dir), skills_dir / "alpha")

    outcome = link_candidate(_candidate(alpha), skills_dir)

    assert outcome.status == "already-linked"


def test_conflicting_symlink_is_left_untouched(tmp_path: Path, skills_repo: Path, skills_dir: Path) -> None:
    unrelated = tmp_path / "unrelated"
    unrelated.mkdir()
    (skills_dir / "alpha").symlink_to(unrelated, target_is_directory=True)

    outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "conflicting-symlink"
    assert outcome.current == str(unrelated)
    assert Path(os.readlink(skills_dir / "alpha")) == unrelated


def test_dangling_symlink_is_a_conflict(tmp_path: Path, skills_repo: Path, skills_dir: Path) -> None:
    (skills_dir / "alpha").symlink_to(tmp_path / "gone", target_is_directory=True)

    outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "conflicting-symlink"
    assert (skills_dir / "alpha").is_symlink()


def test_real_directory_is_never_replaced(skills_repo: Path, skills_dir: Path) -> None:
    real = skills_dir / "alpha"
    real.mkdir()
    (real / "notes.txt").write_text("keep me", encoding="utf-8")

    outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "directory-exists"
    assert not real.is_symlink()
    assert (real / "notes.txt").read_text(encoding="utf-8") == "keep me"


def test_real_file_is_never_replaced(skills_repo: Path, skills_dir: Path) -> None:
    (skills_dir / "alpha").write_text("file", encoding="utf-8")

    outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "directory-exists"
    assert (skills_dir / "alpha").read_text(encoding="utf-8") == "file"


def test_symlink_error_becomes_failed_outcome(skills_repo: Path, skills_dir: Path) -> None:
    with patch.object(Path, "symlink_to", side_effect=PermissionError(13, "Permission denied")):
        outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "failed"
    assert outcome.error is not None
    assert "Permission denied" in outcome.error
    assert not (skills_dir / "alpha").is_symlink()


def test_self_referencing_symlink_is_a_conflict(skills_repo: Path, skills_dir: Path) -> None:
    os.symlink("alpha", skills_dir / "alpha")

    outcome = link_candidate(_candidate(skills_repo / "alpha"), skills_dir)

    assert outcome.status == "conflicting-symlink"
    assert outcome.current == "alpha"
    assert os.readlink(skills_dir / "alpha") == "alpha"
