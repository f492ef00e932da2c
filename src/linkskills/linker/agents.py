"""Agent identifier resolution."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import cast

from linkskills.constants.agents import AGENT_DISPLAY_NAMES, AGENT_IDS, AGENT_SKILLS_SUBDIRS
from linkskills.exceptions import UsageError
from linkskills.model import Agent
from linkskills.types import AgentId
from linkskills.utils import suggest_name


def is_known_agent(name: str) -> bool:
    """Return True for an exact, case-sensitive match against the agent table."""
    return name in AGENT_IDS


def resolve_agent(
    name: str,
    *,
    home: Path | None = None,
    overrides: Mapping[str, Path] | None = None,
) -> Agent:
    """Resolve an agent identifier to its display name and skills directory.

    ``overrides`` comes from the config file and may only relocate agents
    already in the table.
    """
    if not is_known_agent(name):
        hint = suggest_name(name, AGENT_IDS)
        raise UsageError(f"Unknown agent '{name}'" + (f" ({hint})" if hint else ""))

    if overrides and name in overrides:
        skills_dir = overrides[name]
    else:
        base = home if home is not None else Path.home()
        skills_dir = base / AGENT_SKILLS_SUBDIRS[name]

    return Agent(
        id=cast(AgentId, name),
        display_name=AGENT_DISPLAY_NAMES[name],
        skills_dir=skills_dir,
    )
