"""Skill candidate enumeration."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from linkskills.constants.discovery import HIDDEN_NAME_PREFIX, SKILL_MARKDOWN_FILENAME
from linkskills.model import SkillCandidate

logger = logging.getLogger(__name__)


def iter_skill_candidates(source: Path) -> Iterator[SkillCandidate]:
    """Yield immediate subdirectories of *source* in filesystem order.

    Hidden entries are dropped before they become candidates. Symlinks to
    directories count as directories. Candidate paths are absolute but not
    resolved, so a source reached through a symlink keeps that spelling.
    """
    root = source.absolute()
    for entry in root.iterdir():
        if entry.name.startswith(HIDDEN_NAME_PREFIX):
            logger.debug("Ignoring hidden entry %s", entry)
            continue
        try:
            if not entry.is_dir():
                continue
        except OSError as exc:
            logger.debug("Cannot stat %s: %s", entry, exc)
            continue
        try:
            has_marker = (entry / SKILL_MARKDOWN_FILENAME).is_file()
        except OSError as exc:
            logger.debug("Cannot check %s for %s: %s", entry, SKILL_MARKDOWN_FILENAME, exc)
            has_marker = False
        yield SkillCandidate(name=entry.name, path=entry, has_marker=has_marker)
