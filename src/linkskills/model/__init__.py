"""Core data models for linkskills."""

from .entities import Agent, LinkOutcome, LinkResult, RunSummary, SkillCandidate

__all__ = [
    "Agent",
    "LinkOutcome",
    "LinkResult",
    "RunSummary",
    "SkillCandidate",
]
