"""Linker facade.

Re-exports the public linking API so callers can use
``from linkskills.linker import link_skills``.
"""

from __future__ import annotations

from linkskills.linker.agents import is_known_agent, resolve_agent
from linkskills.linker.discovery import iter_skill_candidates
from linkskills.linker.links import link_candidate
from linkskills.linker.orchestrator import LinkProgress, ensure_skills_dir, link_skills

__all__ = [
    "LinkProgress",
    "ensure_skills_dir",
    "is_known_agent",
    "iter_skill_candidates",
    "link_candidate",
    "link_skills",
    "resolve_agent",
]
