"""Frozen entities describing one linking run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from linkskills.types import AgentId, LinkStatus

LINKED_STATUSES: frozenset[str] = frozenset({"linked", "already-linked"})
SKIPPED_STATUSES: frozenset[str] = frozenset({"skipped-no-marker", "conflicting-symlink", "directory-exists"})


@dataclass(frozen=True)
class Agent:
    """A supported agent and the directory it loads skills from."""

    id: AgentId
    display_name: str
    skills_dir: Path


@dataclass(frozen=True)
class SkillCandidate:
    """A directory found directly under the source repository root."""

    name: str
    path: Path
    has_marker: bool


@dataclass(frozen=True)
class LinkOutcome:
    """Result of evaluating one candidate against the agent skills directory."""

    candidate: SkillCandidate
    status: LinkStatus
    target: Path
    current: str | None = None
    error: str | None = None


@dataclass(frozen=True)
class RunSummary:
    """Counters accumulated across every candidate of a run."""

    linked: int = 0
    skipped: int = 0
    failed: int = 0
    created: int = 0

    @classmethod
    def from_outcomes(cls, outcomes: tuple[LinkOutcome, ...] | list[LinkOutcome]) -> RunSummary:
        linked = skipped = failed = created = 0
        for outcome in outcomes:
            if outcome.status in LINKED_STATUSES:
                linked += 1
                if outcome.status == "linked":
                    created += 1
            elif outcome.status in SKIPPED_STATUSES:
                skipped += 1
            else:
                failed += 1
        return cls(linked=linked, skipped=skipped, failed=failed, created=created)


@dataclass(frozen=True)
class LinkResult:
    """Everything a completed run produced."""

    agent: Agent
    source: Path
    skills_dir_created: bool
    outcomes: tuple[LinkOutcome, ...]
    summary: RunSummary
