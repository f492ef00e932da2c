"""Coloured stdout rendering for linking runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO

from linkskills.constants.branding import BANNER_TITLE
from linkskills.constants.discovery import SKILL_MARKDOWN_FILENAME
from linkskills.constants.reporting import (
    ANSI_BLUE,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    BANNER_RULE,
    NO_COLOR_ENV,
    SUMMARY_RULE,
    SYMBOL_FAIL,
    SYMBOL_OK,
    SYMBOL_WARN,
)
from linkskills.model import Agent, LinkOutcome, LinkResult


def should_use_color(
    stream: TextIO,
    *,
    requested: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Decide whether ANSI colours should be written to *stream*."""
    if requested is not None:
        return requested
    env = os.environ if environ is None else environ
    if env.get(NO_COLOR_ENV):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class StdoutReporter:
    """Formats linking progress and summaries as terminal text."""

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{ANSI_RESET}" if self._color else text

    def render_banner(self, agent: Agent) -> str:
        return "\n".join(
            [
                BANNER_RULE,
                BANNER_TITLE,
                BANNER_RULE,
                self._paint(f"Agent: {agent.display_name}", ANSI_BLUE),
                self._paint(f"Skills Directory: {agent.skills_dir}", ANSI_BLUE),
                BANNER_RULE,
                "",
            ]
        )

    def render_source_missing(self, message: str, *, hint_command: str) -> str:
        return "\n".join(
            [
                self._paint(f"Error: {message}", ANSI_RED),
                "",
                "Please provide the correct path:",
                f"  {hint_command}",
            ]
        )

    def render_skills_dir_created(self, agent: Agent) -> str:
        return self._paint(f"Creating {agent.display_name} skills directory: {agent.skills_dir}", ANSI_YELLOW)

    @staticmethod
    def render_scan_started(source: Path) -> str:
        return f"Scanning for skills in: {source}\n"

    def render_outcome(self, outcome: LinkOutcome) -> str:
        """Render the status line(s) for one candidate."""
        name = outcome.candidate.name
        match outcome.status:
            case "linked":
                return self._paint(f"{SYMBOL_OK} Linked: {name}", ANSI_GREEN)
            case "already-linked":
                return self._paint(f"{SYMBOL_OK} {name} (already linked)", ANSI_GREEN)
            case "conflicting-symlink":
                return "\n".join(
                    [
                        self._paint(
                            f"{SYMBOL_WARN} {name} (symlink exists but points to different location)",
                            ANSI_YELLOW,
                        ),
                        f"  Current: {outcome.current}",
                        f"  Expected: {outcome.candidate.path}",
                    ]
                )
            case "directory-exists":
                return self._paint(
                    f"{SYMBOL_WARN} Skipping {name} (directory already exists, not a symlink)",
                    ANSI_YELLOW,
                )
            case "skipped-no-marker":
                return self._paint(f"{SYMBOL_WARN} Skipping {name} (no {SKILL_MARKDOWN_FILENAME} found)", ANSI_YELLOW)
            case _:
                return self._paint(f"{SYMBOL_FAIL} Failed to link: {name}", ANSI_RED)

    def render_summary(self, result: LinkResult) -> str:
        """Render the tally, the closing message and the run trailer."""
        summary = result.summary
        agent = result.agent
        lines = [
            "",
            SUMMARY_RULE,
            "Summary:",
            f"  Linked: {summary.linked}",
            f"  Skipped: {summary.skipped}",
            f"  Failed: {summary.failed}",
            SUMMARY_RULE,
            "",
        ]
        if summary.created > 0:
            lines.append(self._paint("Skills have been symlinked successfully!", ANSI_GREEN))
            lines.append(self._paint(f"Please restart {agent.display_name} to load the new skills.", ANSI_YELLOW))
        else:
            lines.append(self._paint("No new skills were linked.", ANSI_YELLOW))
        lines.extend(
            [
                "",
                f"Agent: {agent.display_name}",
                f"Skills location: {agent.skills_dir}",
                f"Source repository: {result.source}",
            ]
        )
        return "\n".join(lines)
