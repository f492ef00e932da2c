"""Per-candidate link decision procedure."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from linkskills.model import LinkOutcome, SkillCandidate

logger = logging.getLogger(__name__)


def link_candidate(candidate: SkillCandidate, skills_dir: Path) -> LinkOutcome:
    """Evaluate one candidate and create its symlink when the slot is free.

    Existing entries are never modified: a symlink to the wrong place and a
    real file or directory are both reported and left alone. ``OSError`` from
    symlink creation becomes a ``failed`` outcome rather than propagating.
    """
    target = skills_dir / candidate.name

    if not candidate.has_marker:
        return LinkOutcome(candidate=candidate, status="skipped-no-marker", target=target)

    if target.is_symlink():
        current = os.readlink(target)
        if _points_to(target, current, candidate.path):
            return LinkOutcome(candidate=candidate, status="already-linked", target=target, current=current)
        logger.debug("Conflicting symlink %s -> %s (expected %s)", target, current, candidate.path)
        return LinkOutcome(candidate=candidate, status="conflicting-symlink", target=target, current=current)

    if target.exists():
        return LinkOutcome(candidate=candidate, status="directory-exists", target=target)

    try:
        target.symlink_to(candidate.path, target_is_directory=True)
    except OSError as exc:
        logger.warning("Failed to link %s -> %s: %s", target, candidate.path, exc)
        return LinkOutcome(candidate=candidate, status="failed", target=target, error=str(exc))

    logger.debug("Linked %s -> %s", target, candidate.path)
    return LinkOutcome(candidate=candidate, status="linked", target=target)


def _points_to(link: Path, current: str, expected: Path) -> bool:
    """Return True when the link at *link* already refers to *expected*.

    The literal link text is compared first (ignoring a trailing slash) and
    then the fully resolved locations, so relative links and links written
    with a different spelling of the same directory both match.
    """
    if current.rstrip(os.sep) == str(expected).rstrip(os.sep):
        return True
    try:
        return (link.parent / current).resolve() == expected.resolve()
    except (OSError, RuntimeError) as exc:
        logger.debug("Cannot resolve %s: %s", link, exc)
        return False
