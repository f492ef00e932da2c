"""Linking run orchestration: setup, candidate loop, counters."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from linkskills.exceptions import SourceNotFoundError, TargetDirectoryError
from linkskills.linker.discovery import iter_skill_candidates
from linkskills.linker.links import link_candidate
from linkskills.model import Agent, LinkOutcome, LinkResult, RunSummary

logger = logging.getLogger(__name__)


class LinkProgress(Protocol):
    """Receives run events as they happen."""

    def on_skills_dir_created(self, agent: Agent) -> None: ...

    def on_scan_started(self, source: Path) -> None: ...

    def on_outcome(self, outcome: LinkOutcome) -> None: ...


def ensure_skills_dir(skills_dir: Path) -> bool:
    """Create *skills_dir* with parents if missing; return True when created."""
    if skills_dir.is_dir():
        return False
    try:
        skills_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TargetDirectoryError(skills_dir, exc.strerror or str(exc)) from exc
    logger.debug("Created skills directory %s", skills_dir)
    return True


def link_skills(agent: Agent, source: Path, *, progress: LinkProgress | None = None) -> LinkResult:
    """Link every eligible skill under *source* into the agent's skills directory.

    Raises ``SourceNotFoundError`` before touching the filesystem when *source*
    is not a directory, and ``TargetDirectoryError`` when the skills directory
    cannot be created. Candidate-level problems are recorded in the outcomes.
    """
    if not source.is_dir():
        raise SourceNotFoundError(source)

    created = ensure_skills_dir(agent.skills_dir)
    if created and progress is not None:
        progress.on_skills_dir_created(agent)

    if progress is not None:
        progress.on_scan_started(source)

    outcomes: list[LinkOutcome] = []
    for candidate in iter_skill_candidates(source):
        outcome = link_candidate(candidate, agent.skills_dir)
        outcomes.append(outcome)
        if progress is not None:
            progress.on_outcome(outcome)

    summary = RunSummary.from_outcomes(outcomes)
    logger.debug(
        "Run finished for %s: linked=%d skipped=%d failed=%d created=%d",
        agent.id,
        summary.linked,
        summary.skipped,
        summary.failed,
        summary.created,
    )
    return LinkResult(
        agent=agent,
        source=source,
        skills_dir_created=created,
        outcomes=tuple(outcomes),
        summary=summary,
    )
